"""Provenance engine: maps reconstructed objects onto generator-level particles.

All three operations share a single traversal of the association graph
(:func:`walk`), parameterized by a per-leaf visitor:
- `flatten`: ordered list of generator-level particles of an object
- `attribute`: primary/secondary energy decomposition of an object
- `select_leading`: leading generator-level particle of an object
"""

from .attribution import *
from .flatten import *
from .hierarchy import *
from .leading import *
from .walker import *
