"""Module with the store which owns all the nodes of an association graph."""

import numpy as np

from genprov.data import Node, OutputObject
from genprov.truth.hierarchy import classify, is_well_formed
from genprov.utils.enums import ShapeEnum
from genprov.utils.logger import logger

__all__ = ["AssociationGraph"]


class AssociationGraph:
    """Owns the nodes of an association graph for one entry.

    The graph is built once, from compressed child lists, and is read-only
    afterwards. Upon construction, each node is tagged with its shape and the
    hierarchy is validated, so that traversals never have to re-infer it.

    Attributes
    ----------
    nodes : List[Node]
        List of nodes, ordered by node index
    malformed_ids : np.ndarray
        Indexes of the nodes which do not strictly follow the nesting rules
        of their shape
    """

    def __init__(self, nodes):
        """Initialize the graph from a list of linked nodes.

        Parameters
        ----------
        nodes : List[Node]
            List of nodes, with their children references already set
        """
        self.nodes = nodes
        self.tag()

    @classmethod
    def from_arrays(
        cls, momentum, position, pid, is_pu, pt, child_index, child_offset
    ):
        """Builds a graph from node attribute arrays and compressed child lists.

        The children of node `i` are the nodes indexed by
        `child_index[child_offset[i]:child_offset[i + 1]]`, in order.

        Parameters
        ----------
        momentum : np.ndarray
            (N, 4) Four-momenta (px, py, pz, E)
        position : np.ndarray
            (N, 4) Four-positions (x, y, z, t)
        pid : np.ndarray
            (N) Particle type codes
        is_pu : np.ndarray
            (N) Pileup flags
        pt : np.ndarray
            (N) Cached transverse momenta
        child_index : np.ndarray
            (M) Concatenated child indexes
        child_offset : np.ndarray
            (N + 1) Offsets of the child list of each node in `child_index`

        Returns
        -------
        AssociationGraph
            Graph which owns the nodes
        """
        # Check that the arrays are consistent
        num_nodes = len(pid)
        for name, arr in (("momentum", momentum), ("position", position)):
            if len(arr) != num_nodes:
                raise ValueError(
                    f"The `{name}` array has {len(arr)} rows, expected {num_nodes}."
                )
        offsets = np.asarray(child_offset, dtype=np.int64)
        index = np.asarray(child_index, dtype=np.int64)
        if len(offsets) != num_nodes + 1 or offsets[-1] != len(index):
            raise ValueError(
                "The `child_offset` array must have one more entry than there "
                "are nodes and end with the length of `child_index`."
            )
        if len(index) and (index.min() < 0 or index.max() >= num_nodes):
            raise ValueError("The `child_index` array refers to unknown nodes.")

        # Build the nodes, then link them
        nodes = []
        for i in range(num_nodes):
            nodes.append(
                Node(
                    id=i,
                    pid=int(pid[i]),
                    is_pu=bool(is_pu[i]),
                    pt=float(pt[i]),
                    momentum=np.array(momentum[i], dtype=np.float64),
                    position=np.array(position[i], dtype=np.float64),
                )
            )

        for i, node in enumerate(nodes):
            node.children = [nodes[j] for j in index[offsets[i] : offsets[i + 1]]]

        return cls(nodes)

    def tag(self):
        """Assigns its shape to each node and records malformed nodes."""
        malformed = []
        for node in self.nodes:
            node.shape = int(classify(node))
            if not is_well_formed(node):
                malformed.append(node.id)

        self.malformed_ids = np.array(malformed, dtype=np.int64)
        if len(malformed):
            logger.warning(
                "Found %d malformed node(s) in the association graph, "
                "they are assigned their most specific shape: %s",
                len(malformed),
                malformed,
            )

    def __len__(self):
        """Number of nodes in the graph."""
        return len(self.nodes)

    def __getitem__(self, idx):
        """Returns one node of the graph by index."""
        return self.nodes[idx]

    @property
    def leaves(self):
        """List of generator-level particles in the graph.

        Returns
        -------
        List[Node]
            Nodes with no children, ordered by index
        """
        return [n for n in self.nodes if n.shape == ShapeEnum.LEAF]

    def build_objects(
        self, momentum, position, pid, constituent_index, constituent_offset
    ):
        """Builds the output objects which refer to nodes of this graph.

        The constituents of object `k` are the nodes indexed by
        `constituent_index[constituent_offset[k]:constituent_offset[k + 1]]`.

        Parameters
        ----------
        momentum : np.ndarray
            (K, 4) Four-momenta (px, py, pz, E)
        position : np.ndarray
            (K, 4) Four-positions (x, y, z, t)
        pid : np.ndarray
            (K) Reconstructed particle type codes
        constituent_index : np.ndarray
            (C) Concatenated constituent node indexes
        constituent_offset : np.ndarray
            (K + 1) Offsets of the constituent list of each object

        Returns
        -------
        List[OutputObject]
            List of objects, ordered by index
        """
        num_objects = len(pid)
        offsets = np.asarray(constituent_offset, dtype=np.int64)
        index = np.asarray(constituent_index, dtype=np.int64)
        if len(offsets) != num_objects + 1 or offsets[-1] != len(index):
            raise ValueError(
                "The `constituent_offset` array must have one more entry than "
                "there are objects and end with the length of `constituent_index`."
            )
        if len(index) and (index.min() < 0 or index.max() >= len(self)):
            raise ValueError("The `constituent_index` array refers to unknown nodes.")

        objects = []
        for k in range(num_objects):
            constituents = [self.nodes[j] for j in index[offsets[k] : offsets[k + 1]]]
            objects.append(
                OutputObject(
                    id=k,
                    pid=int(pid[k]),
                    momentum=np.array(momentum[k], dtype=np.float64),
                    position=np.array(position[k], dtype=np.float64),
                    constituents=constituents,
                )
            )

        return objects
