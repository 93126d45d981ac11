"""Input/output tools.

This module contains the readers which load association graphs and object
collections from files, and the writers which store provenance records.
"""

from .factories import *
