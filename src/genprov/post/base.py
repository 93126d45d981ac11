"""Contains base class of all post-processors."""

from abc import ABC, abstractmethod


class PostBase(ABC):
    """Base class of all post-processors.

    This base class performs the following functions:
      - Ensures that the necessary method exist
      - Checks that the post-processor is provided the necessary data
        products to do its job

    Attributes
    ----------
    name : str
        Name of the post-processor as defined in the configuration file
    aliases : Tuple[str]
        Alternative acceptable names for a post-processor
    """

    # Name of the post-processor (as specified in the configuration)
    name = None

    # Alternative allowed names of the post-processor
    aliases = ()

    # Names of post-processors which must be run upstream of this one
    _upstream = ()

    def __init__(self, obj_keys=None):
        """Initialize default post-processor object properties.

        Parameters
        ----------
        obj_keys : List[str], optional
            Names of the object collections this post-processor operates on
        """
        if obj_keys is None:
            obj_keys = []
        elif isinstance(obj_keys, str):
            obj_keys = [obj_keys]

        self.obj_keys = list(obj_keys)
        self._keys = {k: True for k in self.obj_keys}

    @property
    def keys(self):
        """Dictionary of (key, necessity) pairs which determine which data keys
        are needed/optional for the post-processor to run.

        Returns
        -------
        Dict[str, bool]
            Dictionary of (key, necessity) pairs to be used
        """
        return self._keys

    def __call__(self, data):
        """Checks the data products, then calls the underlying process.

        Parameters
        ----------
        data : dict
            Dictionary of data products

        Returns
        -------
        dict
            Update to the input dictionary
        """
        # Fetch the necessary information
        for key, req in self.keys.items():
            if req and key not in data:
                raise KeyError(
                    f"Unable to find `{key}` in the data dictionary, which is "
                    f"required by the `{self.name}` post-processor."
                )

        return self.process(data)

    @abstractmethod
    def process(self, data):
        """Place-holder method to be defined in each post-processor.

        Parameters
        ----------
        data : dict
            Dictionary of data products
        """
        raise NotImplementedError("Must define the `process` function.")
