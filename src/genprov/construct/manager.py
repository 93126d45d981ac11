"""Class to build the association graph and its objects for one entry."""

from .graph import AssociationGraph

__all__ = ["BuildManager"]


class BuildManager:
    """Manager which constructs data representations from raw arrays.

    The reader provides, for each entry, a `nodes` block of node attribute
    arrays and one block of object attribute arrays per object collection.
    The manager turns them into an :class:`AssociationGraph` (stored under
    `graph`), the list of its generator-level particles (stored under
    `particles`) and one list of :class:`OutputObject` per collection.
    """

    # Arrays needed to build the association graph
    _node_arrays = (
        "momentum",
        "position",
        "pid",
        "is_pu",
        "pt",
        "child_index",
        "child_offset",
    )

    # Arrays needed to build a collection of output objects
    _object_arrays = (
        "momentum",
        "position",
        "pid",
        "constituent_index",
        "constituent_offset",
    )

    def __init__(self, keys=None, node_key="nodes"):
        """Initializes the build manager.

        Parameters
        ----------
        keys : List[str], optional
            Object collections to build. If not specified, every block of the
            entry other than the node block is built.
        node_key : str, default 'nodes'
            Name of the block which holds the node arrays
        """
        self.keys = keys
        self.node_key = node_key

    def __call__(self, data):
        """Build the representations for one entry.

        Parameters
        ----------
        data : dict
            Dictionary of data products, updated in place
        """
        # Build the association graph
        if self.node_key not in data:
            raise KeyError(
                f"Cannot build the association graph without `{self.node_key}`."
            )
        nodes = data.pop(self.node_key)
        graph = AssociationGraph.from_arrays(
            **{k: self.fetch(nodes, k, self.node_key) for k in self._node_arrays}
        )
        data["graph"] = graph
        data["particles"] = graph.leaves

        # Build the object collections
        keys = self.keys
        if keys is None:
            keys = [k for k, v in data.items() if isinstance(v, dict)]
        for key in keys:
            if key not in data:
                raise KeyError(f"Object collection `{key}` not found in the entry.")
            block = data[key]
            data[key] = graph.build_objects(
                **{k: self.fetch(block, k, key) for k in self._object_arrays}
            )

    @staticmethod
    def fetch(block, name, key):
        """Fetches one array from a block of arrays.

        Parameters
        ----------
        block : dict
            Dictionary of arrays
        name : str
            Name of the array
        key : str
            Name of the block, used to report missing arrays

        Returns
        -------
        np.ndarray
            Requested array
        """
        if name not in block:
            raise KeyError(f"The `{key}` block is missing the `{name}` array.")

        return block[name]
