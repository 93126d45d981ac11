"""Attribution of an object energy to primary and secondary interactions."""

import numpy as np

from genprov.data import AttributionResult

from .walker import LeafVisitor, walk

__all__ = ["AttributionVisitor", "attribute"]


class AttributionVisitor(LeafVisitor):
    """Accumulates distinct leaf four-momenta into primary/secondary sums.

    The pileup flag of the `source` node decides which sum a leaf goes
    into, while the four-momentum always comes from the leaf itself. Within
    a tower the source is the intermediate track-like node, everywhere else
    it is the leaf.

    A leaf is skipped if a four-momentum with the exact same
    (pt, eta, phi, E) was already accumulated in its target sum.
    """

    def __init__(self):
        self.primary, self.secondary = np.zeros(4), np.zeros(4)
        self.primary_keys, self.secondary_keys = [], []

    def visit(self, leaf, source, shape):
        if source.is_pu:
            keys, total = self.secondary_keys, self.secondary
        else:
            keys, total = self.primary_keys, self.primary

        key = leaf.kinematic_key
        if key in keys:
            return

        keys.append(key)
        total += leaf.momentum

    def result(self):
        return AttributionResult(
            primary=self.primary,
            secondary=self.secondary,
            num_primary=len(self.primary_keys),
            num_secondary=len(self.secondary_keys),
        )


def attribute(obj):
    """Decomposes the energy of an object into primary and secondary parts.

    Parameters
    ----------
    obj : OutputObject
        Object to attribute

    Returns
    -------
    AttributionResult
        Primary and secondary four-momentum sums and energy fractions. The
        fractions are nan when the total energy is zero.
    """
    return walk(obj, AttributionVisitor())
