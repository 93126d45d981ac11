"""Writers which store provenance records to files."""

from .csv import *
from .hdf5 import *
