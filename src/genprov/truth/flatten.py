"""Flattening of an object down to its generator-level particles."""

from .walker import LeafVisitor, walk

__all__ = ["FlattenVisitor", "flatten"]


class FlattenVisitor(LeafVisitor):
    """Collects every emitted leaf, in traversal order."""

    def __init__(self):
        self.leaves = []

    def visit(self, leaf, source, shape):
        self.leaves.append(leaf)

    def result(self):
        return self.leaves


def flatten(obj):
    """Returns the ordered list of generator-level particles of an object.

    The order follows the order of the constituents and, within a tower-like
    constituent, the order of its children. The same particle is listed as
    many times as it is reached.

    Parameters
    ----------
    obj : OutputObject
        Object to flatten

    Returns
    -------
    List[Node]
        Ordered list of leaves
    """
    return walk(obj, FlattenVisitor())
