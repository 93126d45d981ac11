"""Module which contains enumerated variables shared across the project."""

from enum import IntEnum

from .globals import *

__all__ = ["ShapeEnum"]


class ShapeEnum(IntEnum):
    """Enumerates all possible association graph node shapes."""

    UNKNOWN = UNKWN_SHP
    LEAF = LEAF_SHP
    TRACK = TRACK_SHP
    TOWER = TOWER_SHP

    @property
    def label(self):
        """Human-readable name of the shape.

        Returns
        -------
        str
            Shape label
        """
        return SHAPE_LABELS[self.value]
