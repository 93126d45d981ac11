"""Sets up fixtures general to the entire test suite of this package.

This file is read during the collection phase of pytest when running anything
inside this directory.
"""

import os

import h5py
import numpy as np
import pytest

from genprov.data import Node, OutputObject


class GraphFactory:
    """Builds small association graphs node by node.

    Node indexes are assigned in creation order. Leaves are given a
    four-momentum along the x axis so that their transverse momentum is
    simply `pt`, unless a four-momentum is provided explicitly.
    """

    def __init__(self):
        self.nodes = []

    def add(self, node):
        """Registers a node, assigns it the next index."""
        node.id = len(self.nodes)
        self.nodes.append(node)
        return node

    def leaf(
        self, pt=1.0, energy=None, is_pu=False, pid=211, momentum=None, cached_pt=None
    ):
        """Builds a generator-level particle."""
        if momentum is None:
            energy = pt if energy is None else energy
            momentum = [pt, 0.0, 0.0, energy]
        if cached_pt is None:
            cached_pt = float(np.hypot(momentum[0], momentum[1]))
        return self.add(
            Node(
                pid=pid,
                is_pu=is_pu,
                pt=cached_pt,
                momentum=np.array(momentum, dtype=float),
            )
        )

    def track(self, *children, is_pu=False):
        """Builds a track-like node (normally a single leaf child)."""
        return self.add(Node(pid=0, is_pu=is_pu, pt=-1.0, children=list(children)))

    def tower(self, *children, is_pu=False):
        """Builds a tower-like node from a list of track-like nodes."""
        return self.add(Node(pid=0, is_pu=is_pu, pt=-1.0, children=list(children)))

    def obj(self, *constituents, pid=211, momentum=None):
        """Builds an output object from its direct constituents."""
        return OutputObject(
            id=0, pid=pid, momentum=momentum, constituents=list(constituents)
        )


@pytest.fixture(name="graph")
def fixture_graph():
    """Provides an empty graph factory."""
    return GraphFactory()


def graph_entries():
    """Returns the array blocks of two dummy entries.

    The first entry holds:
    - 0: primary leaf, p = (3, 4, 0, 10), cached pt 5
    - 1: pileup leaf, p = (1, 0, 1, 5), cached pt 1
    - 2: primary leaf, p = (0, 2, 0, 4), cached pt 2
    - 3: track-like node -> [2]
    - 4: tower-like node -> [3]

    with two particle-flow candidates ([0, 1] and [4]) and one tower ([4]).
    The second entry holds a single leaf and one candidate with no
    constituents, and no towers.
    """
    entry_0 = {
        "nodes": {
            "momentum": np.array(
                [
                    [3.0, 4.0, 0.0, 10.0],
                    [1.0, 0.0, 1.0, 5.0],
                    [0.0, 2.0, 0.0, 4.0],
                    [0.0, 0.0, 0.0, 0.0],
                    [0.0, 0.0, 0.0, 0.0],
                ]
            ),
            "position": np.zeros((5, 4)),
            "pid": np.array([211, 22, 11, 0, 0], dtype=np.int64),
            "is_pu": np.array([False, True, False, False, False]),
            "pt": np.array([5.0, 1.0, 2.0, -1.0, -1.0]),
            "child_index": np.array([2, 3], dtype=np.int64),
            "child_offset": np.array([0, 0, 0, 0, 1, 2], dtype=np.int64),
        },
        "pf_candidates": {
            "momentum": np.array([[4.0, 4.0, 1.0, 15.0], [0.0, 2.0, 0.0, 4.0]]),
            "position": np.zeros((2, 4)),
            "pid": np.array([211, 11], dtype=np.int64),
            "constituent_index": np.array([0, 1, 4], dtype=np.int64),
            "constituent_offset": np.array([0, 2, 3], dtype=np.int64),
        },
        "towers": {
            "momentum": np.array([[0.0, 2.0, 0.0, 4.0]]),
            "position": np.zeros((1, 4)),
            "pid": np.array([0], dtype=np.int64),
            "constituent_index": np.array([4], dtype=np.int64),
            "constituent_offset": np.array([0, 1], dtype=np.int64),
        },
    }

    entry_1 = {
        "nodes": {
            "momentum": np.array([[1.0, 0.0, 0.0, 1.0]]),
            "position": np.zeros((1, 4)),
            "pid": np.array([22], dtype=np.int64),
            "is_pu": np.array([False]),
            "pt": np.array([1.0]),
            "child_index": np.empty(0, dtype=np.int64),
            "child_offset": np.array([0, 0], dtype=np.int64),
        },
        "pf_candidates": {
            "momentum": np.array([[1.0, 0.0, 0.0, 1.0]]),
            "position": np.zeros((1, 4)),
            "pid": np.array([22], dtype=np.int64),
            "constituent_index": np.empty(0, dtype=np.int64),
            "constituent_offset": np.array([0, 0], dtype=np.int64),
        },
        "towers": {
            "momentum": np.empty((0, 4)),
            "position": np.empty((0, 4)),
            "pid": np.empty(0, dtype=np.int64),
            "constituent_index": np.empty(0, dtype=np.int64),
            "constituent_offset": np.array([0], dtype=np.int64),
        },
    }

    return [entry_0, entry_1]


def write_graph_file(path, entries, version="0.1.0"):
    """Stores a list of entries in the input HDF5 layout.

    Parameters
    ----------
    path : str
        Path to the output file
    entries : List[dict]
        List of entries, each a dictionary of array blocks
    version : str, default '0.1.0'
        Version tag stored in the `info` attributes
    """
    with h5py.File(path, "w") as out_file:
        out_file.create_dataset("info", (0,), maxshape=(None,), dtype=None)
        out_file["info"].attrs["version"] = version
        events = out_file.create_group("events")
        for i, entry in enumerate(entries):
            event = events.create_group(str(i))
            for key, block in entry.items():
                group = event.create_group(key)
                for name, arr in block.items():
                    group.create_dataset(name, data=arr)


@pytest.fixture(name="entries")
def fixture_entries():
    """Provides the array blocks of two dummy entries."""
    return graph_entries()


@pytest.fixture(name="graph_file")
def fixture_graph_file(tmp_path):
    """Writes a dummy input HDF5 file with two entries.

    Parameters
    ----------
    tmp_path : str
       Generic pytest fixture used to handle temporary test files
    """
    path = os.path.join(tmp_path, "events.h5")
    write_graph_file(path, graph_entries())

    return path


@pytest.fixture(name="graph_file_factory")
def fixture_graph_file_factory(tmp_path):
    """Provides a function which writes entries to a file under `tmp_path`."""

    def write(name, entries):
        path = os.path.join(tmp_path, name)
        write_graph_file(path, entries)
        return path

    return write
