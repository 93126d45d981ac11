"""Readers which load entries from files."""

from .hdf5 import *
