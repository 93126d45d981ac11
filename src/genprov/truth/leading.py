"""Selection of the leading generator-level particle of an object."""

import numpy as np

from genprov.utils.enums import ShapeEnum

from .walker import LeafVisitor, walk

__all__ = ["LeadingVisitor", "select_leading"]


class LeadingVisitor(LeafVisitor):
    """Keeps track of the highest-scoring leaf of a traversal.

    Leaves reached through a leaf or track-like constituent are compared
    across the whole object, using their cached transverse momentum.

    Each tower-like constituent opens a fresh comparison scope: the running
    score is set back to zero, then the tower leaves compete using the
    transverse momentum derived from their four-momentum. The leaf selected
    before the tower is only kept if no tower leaf has a positive transverse
    momentum.
    """

    def __init__(self):
        self.best = None
        self.score = -np.inf

    def enter_tower(self, tower):
        self.score = 0.0

    def visit(self, leaf, source, shape):
        if shape == ShapeEnum.TOWER:
            score = leaf.momentum_pt
        else:
            score = leaf.pt

        if score > self.score:
            self.best, self.score = leaf, score

    def result(self):
        return self.best


def select_leading(obj):
    """Selects the leading generator-level particle of an object.

    Parameters
    ----------
    obj : OutputObject
        Object to select the leading particle of

    Returns
    -------
    Node, optional
        Leading leaf, `None` if no eligible leaf was found
    """
    return walk(obj, LeadingVisitor())
