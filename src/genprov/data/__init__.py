"""Data structures used by the provenance engine.

- `base`: Parent dataclass of all data structures (defaults, equality and
  columnar export)
- `node`: Association graph node (generator-level particle, track-like or
  tower-like association entry)
- `output`: Reconstructed object whose constituents are analyzed
- `attribution`: Primary/secondary energy decomposition of an object
"""

from .attribution import *
from .node import *
from .output import *
