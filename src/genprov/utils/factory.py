"""Contains functions needed to instantiate a class from a dictionary.

This allows to generically convert a YAML block into an instatiated class
with all the appropriate checks that the class exists and is provided
with appropriate arguments.
"""

from copy import deepcopy

from .logger import logger


def module_dict(module, pattern=None):
    """Converts module into a dictionary which maps class names onto classes.

    Parameters
    ----------
    module : module
        Module from which to fetch the classes
    pattern : str, optional
        If specified, looks for a specific pattern in the class name

    Returns
    -------
    dict
        Dictionary which maps acceptable class names to classes themselves
    """
    # Loop over the public classes of the module
    mod_dict = {}
    for cls_name in getattr(module, "__all__", dir(module)):
        if cls_name[0] == "_":
            continue

        # Only consider classes which belong to the module of interest
        cls = getattr(module, cls_name)
        if not isinstance(cls, type) or module.__name__ not in cls.__module__:
            continue

        if pattern is not None and pattern not in cls.__name__:
            continue

        # Register the class under its own name, its short name and aliases
        mod_dict[cls_name] = cls
        if getattr(cls, "name", None):
            mod_dict[cls.name] = cls
        for alias in getattr(cls, "aliases", ()):
            mod_dict[alias] = cls

    return mod_dict


def instantiate(mod_dict, cfg, **kwargs):
    """Instantiates a class based on a configuration dictionary and a list of
    possible classes to chose from.

    This function supports two YAML configuration structures
    (parsed as a dictionary):

    .. code-block:: yaml

        function:
          name: function_name
          kwarg_1: value_1
          kwarg_2: value_2
          ...

    or

    .. code-block:: yaml

        function:
          name: function_name
          kwargs:
            kwarg_1: value_1
            kwarg_2: value_2
            ...

    Parameters
    ----------
    mod_dict : dict
        Dictionary which maps a class name onto an object class.
    cfg : Union[str, dict]
        Configuration dictionary (or name of the class)
    **kwargs : dict, optional
        Additional parameters to pass to the class

    Returns
    -------
    object
        Instantiated object
    """
    # If the configuration is a string, assume it is a class name with no
    # parameters to be passed to it
    if isinstance(cfg, str):
        cfg = {"name": cfg}

    # Get the name of the class, check that it exists
    config = deepcopy(cfg)
    assert "name" in config, "Could not find the name of the class under `name`"
    class_name = config.pop("name")
    if class_name not in mod_dict:
        raise ValueError(
            f"Could not find '{class_name}' in the dictionary "
            f"which maps names to classes. Available names: "
            f"{list(mod_dict.keys())}"
        )

    # Merge top-level keyword arguments with the `kwargs` block
    kwargs = dict(config.pop("kwargs", {}), **kwargs)
    for key in config.keys():
        assert key not in kwargs, (
            f"The keyword argument {key} is provided "
            "at the top level and under `kwargs`. Ambiguous."
        )
    kwargs.update(config)

    # Intialize
    cls = mod_dict[class_name]
    try:
        return cls(**kwargs)

    except Exception as err:
        logger.error(
            "Failed to instantiate %s with these arguments:\n  - kwargs: %s",
            cls.__name__,
            kwargs,
        )

        raise err
