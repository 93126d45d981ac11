"""Defines constants used throughout the package."""

# Association graph node shapes
UNKWN_SHP = -1  # Node which has not been tagged yet
LEAF_SHP = 0  # Generator-level particle, no children
TRACK_SHP = 1  # Exactly one child, itself a leaf
TOWER_SHP = 2  # One or more children, each track-like

# Mapping between node shapes and their names
SHAPE_LABELS = {
    UNKWN_SHP: "Unknown",
    LEAF_SHP: "Leaf",
    TRACK_SHP: "Track",
    TOWER_SHP: "Tower",
}

# Speed of light in m/s
SPEED_OF_LIGHT = 2.99792458e8

# Pseudorapidity returned for vectors along the beam axis
BEAM_AXIS_ETA = 1e11

# Pseudorapidity stored in records for vectors along the beam axis
RECORD_BEAM_AXIS_ETA = 999.9
