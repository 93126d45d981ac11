"""Test the association graph store."""

import logging

import numpy as np
import pytest

from genprov.construct import AssociationGraph
from genprov.data import OutputObject
from genprov.utils.enums import ShapeEnum


@pytest.fixture(name="nodes")
def fixture_nodes(entries):
    """Provides the node arrays of the first dummy entry."""
    return entries[0]["nodes"]


class TestAssociationGraph:
    """Test the graph construction and its validation."""

    def test_from_arrays(self, nodes):
        """Nodes are built, linked and tagged with their shape."""
        graph = AssociationGraph.from_arrays(**nodes)

        assert len(graph) == 5
        assert [n.shape for n in graph.nodes] == [
            ShapeEnum.LEAF,
            ShapeEnum.LEAF,
            ShapeEnum.LEAF,
            ShapeEnum.TRACK,
            ShapeEnum.TOWER,
        ]
        assert graph[3].children == [graph[2]]
        assert graph[4].children[0] is graph[3]
        assert graph[1].is_pu is True
        assert graph[0].pt == 5.0
        assert len(graph.malformed_ids) == 0

    def test_leaves(self, nodes):
        """The generator-level particles are the childless nodes."""
        graph = AssociationGraph.from_arrays(**nodes)
        assert [n.id for n in graph.leaves] == [0, 1, 2]

    def test_malformed(self, caplog):
        """Malformed nodes are tagged and reported."""
        with caplog.at_level(logging.WARNING, logger="genprov"):
            graph = AssociationGraph.from_arrays(
                momentum=np.zeros((3, 4)),
                position=np.zeros((3, 4)),
                pid=np.zeros(3, dtype=np.int64),
                is_pu=np.zeros(3, dtype=bool),
                pt=np.zeros(3),
                child_index=np.array([0, 1]),
                child_offset=np.array([0, 0, 0, 2]),
            )

        assert graph[2].shape == ShapeEnum.TRACK
        np.testing.assert_array_equal(graph.malformed_ids, [2])
        assert "malformed" in caplog.text

    def test_bad_offsets(self, nodes):
        """Inconsistent child offsets are rejected."""
        nodes["child_offset"] = nodes["child_offset"][:-1]
        with pytest.raises(ValueError):
            AssociationGraph.from_arrays(**nodes)

    def test_bad_index(self, nodes):
        """Child indexes must refer to existing nodes."""
        nodes["child_index"] = np.array([2, 7])
        with pytest.raises(ValueError):
            AssociationGraph.from_arrays(**nodes)

    def test_bad_rows(self, nodes):
        """Attribute arrays must have one row per node."""
        nodes["momentum"] = nodes["momentum"][:2]
        with pytest.raises(ValueError):
            AssociationGraph.from_arrays(**nodes)

    def test_build_objects(self, entries):
        """Objects refer to the nodes of the graph."""
        graph = AssociationGraph.from_arrays(**entries[0]["nodes"])
        objects = graph.build_objects(**entries[0]["pf_candidates"])

        assert len(objects) == 2
        assert all(isinstance(obj, OutputObject) for obj in objects)
        assert objects[0].constituents[0] is graph[0]
        assert [n.id for n in objects[0].constituents] == [0, 1]
        assert objects[1].constituents == [graph[4]]
        assert objects[1].pid == 11
        np.testing.assert_array_equal(objects[0].momentum, [4.0, 4.0, 1.0, 15.0])

    def test_build_no_objects(self, entries):
        """An empty collection yields no objects."""
        graph = AssociationGraph.from_arrays(**entries[1]["nodes"])
        assert graph.build_objects(**entries[1]["towers"]) == []

    def test_build_bad_index(self, entries):
        """Constituent indexes must refer to existing nodes."""
        graph = AssociationGraph.from_arrays(**entries[1]["nodes"])
        with pytest.raises(ValueError):
            graph.build_objects(**entries[0]["pf_candidates"])
