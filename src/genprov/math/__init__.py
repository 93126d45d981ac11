"""Module with fast, Numba-accelerated, compiled math routines.

This includes:
- `kinematics.py` includes four-vector functions, as found in ROOT's
  `TLorentzVector` (transverse momentum, pseudorapidity, azimuth, mass)
"""

from . import kinematics

# Expose all kinematic functions directly
from .kinematics import *
