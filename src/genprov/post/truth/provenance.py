"""Generator-level provenance of reconstructed objects."""

from genprov.post.base import PostBase
from genprov.truth import attribute, flatten, select_leading
from genprov.utils.logger import logger

__all__ = ["ProvenanceProcessor"]


class ProvenanceProcessor(PostBase):
    """Traces reconstructed objects back to their generator-level particles.

    Every object of the requested collections is flattened down to the
    generator-level particles it was built from. Objects of the collections
    which require full provenance (particle-flow candidates, by default) also
    get their energy attributed to primary and secondary interactions and
    their leading generator-level particle selected.

    Objects are processed independently: an error raised while processing one
    object is logged and leaves that object with undefined provenance, the
    other objects are processed normally.
    """

    # Name of the post-processor (as specified in the configuration)
    name = "provenance"

    # Alternative allowed names of the post-processor
    aliases = ("fill_particles",)

    def __init__(self, flatten_keys=None, full_keys=("pf_candidates",)):
        """Initialize the provenance processor.

        Parameters
        ----------
        flatten_keys : List[str], optional
            Object collections which are only flattened (towers, photons,
            jets, electrons, muons, ...)
        full_keys : List[str], default ('pf_candidates',)
            Object collections which are flattened, attributed and get a
            leading particle
        """
        # Parse the collection lists
        flatten_keys = self.as_list(flatten_keys)
        full_keys = self.as_list(full_keys)
        overlap = set(flatten_keys).intersection(full_keys)
        assert not overlap, (
            f"Object collection(s) {list(overlap)} requested both in "
            "`flatten_keys` and `full_keys`. Ambiguous."
        )

        # Initialize the parent class
        super().__init__(flatten_keys + full_keys)
        self.flatten_keys = flatten_keys
        self.full_keys = full_keys

    @staticmethod
    def as_list(keys):
        """Turns a configuration value into a list of collection names."""
        if keys is None:
            return []
        if isinstance(keys, str):
            return [keys]

        return list(keys)

    def process(self, data):
        """Fill the provenance information of all objects in one entry.

        Parameters
        ----------
        data : dict
            Dictionary of data products
        """
        for key in self.obj_keys:
            full = key in self.full_keys
            for obj in data[key]:
                try:
                    self.process_object(obj, full)

                except Exception as err:
                    logger.error(
                        "Entry %s: failed to trace the provenance of object "
                        "%d in `%s`: %s",
                        data.get("index"),
                        obj.id,
                        key,
                        repr(err),
                    )

    @staticmethod
    def process_object(obj, full):
        """Fill the provenance information of one object.

        Parameters
        ----------
        obj : OutputObject
            Object to process
        full : bool
            If `True`, also attribute the energy and select the leading
            particle of the object
        """
        # Only store the results once every step has succeeded
        particles = flatten(obj)
        if full:
            attribution = attribute(obj)
            leading = select_leading(obj)

        obj.set_particles(particles)
        if full:
            obj.set_attribution(attribution)
            obj.set_leading(leading)
