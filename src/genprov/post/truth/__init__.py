"""Truth-level post-processors."""

from .provenance import *
