"""Provenance Flattening & Attribution Engine.

Given reconstructed physics objects linked to the generator-level particles
of a simulation through a layered association graph, `genprov`:

- flattens each object's associations down to its generator-level particles,
- decomposes each object's energy into primary-interaction and pileup
  contributions,
- selects the leading generator-level particle of each object.

The :class:`Driver` chains reading, graph building, post-processing and
writing for each entry of the input files.
"""

from .driver import Driver
from .version import __version__
