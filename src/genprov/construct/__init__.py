"""Construction of the association graph and of the objects it links.

- `AssociationGraph`: store which owns all the nodes of an entry, tags their
  shape and validates the hierarchy once
- `BuildManager`: turns the raw arrays of an entry into a graph and lists
  of output objects
"""

from .graph import AssociationGraph
from .manager import BuildManager
