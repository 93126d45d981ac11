"""Module to write provenance records to an HDF5 file."""

import os

import h5py
import numpy as np
import yaml

from genprov.version import __version__

__all__ = ["HDF5Writer"]


class HDF5Writer:
    """Writes object records to an HDF5 file.

    The output file mirrors the input layout: an `events` group holds one
    group per entry (named after the entry index), which holds one group per
    object collection. Each object attribute is stored as one dataset with one
    row per object. Variable-length attributes (such as `particle_ids`) are
    concatenated across objects and complemented by an `<attr>_offset`
    dataset of length `K+1`. The `info` dataset attributes store the version
    and the configuration used to produce the file.

    Typical configuration should look like:

    .. code-block:: yaml

        io:
          ...
          writer:
            name: hdf5
            file_name: provenance.h5
            keys:
              - pf_candidates
              - towers
    """

    name = "hdf5"

    def __init__(
        self, file_name="provenance.h5", keys=("pf_candidates",), overwrite=False
    ):
        """Initializes the basics of the output file.

        Parameters
        ----------
        file_name : str, default 'provenance.h5'
            Name of the output HDF5 file
        keys : List[str], default ['pf_candidates']
            Object collections to store
        overwrite : bool, default False
            If `True`, overwrite the output file if it already exists
        """
        # Check that the output file does not already exist, if requested
        if not overwrite and os.path.isfile(file_name):
            raise FileExistsError(f"File with name {file_name} already exists.")

        # Store persistent attributes
        self.file_name = file_name
        self.keys = [keys] if isinstance(keys, str) else list(keys)
        self.ready = False

    def create(self, cfg=None):
        """Create the output file structure.

        Parameters
        ----------
        cfg : dict, optional
            Dictionary containing the complete configuration
        """
        with h5py.File(self.file_name, "w") as out_file:
            # Initialize the info dataset that stores environment parameters
            out_file.create_dataset("info", (0,), maxshape=(None,), dtype=None)
            out_file["info"].attrs["version"] = __version__
            if cfg is not None:
                out_file["info"].attrs["cfg"] = yaml.dump(cfg)

            # Initialize the group which holds the entries
            out_file.create_group("events")

        # Mark file as ready for use
        self.ready = True

    def __call__(self, data, cfg=None):
        """Writes the records of one entry.

        Parameters
        ----------
        data : dict
            Dictionary of data products
        cfg : dict, optional
            Complete configuration, stored once when the file is created
        """
        # If needed, create the output file
        if not self.ready:
            self.create(cfg)

        # Append the file with the entry
        with h5py.File(self.file_name, "a") as out_file:
            event = out_file["events"].create_group(str(int(data["index"])))
            for key in self.keys:
                if key not in data:
                    raise KeyError(
                        f"Object collection `{key}` not found in the entry."
                    )

                self.store_objects(event.create_group(key), data[key])

    @staticmethod
    def store_objects(group, objects):
        """Stores a list of data objects as one dataset per attribute.

        Parameters
        ----------
        group : h5py.Group
            Group in which to store the datasets
        objects : List[DataBase]
            List of data objects of a single type
        """
        # If there are no objects, there is no attribute to infer
        if not len(objects):
            return

        # Loop over the attributes of the object class
        ref = objects[0]
        values = [obj.as_dict() for obj in objects]
        for attr in values[0].keys():
            column = [v[attr] for v in values]
            if attr in ref.var_length_attrs:
                # Concatenate variable-length arrays, store their boundaries
                lengths = [len(c) for c in column]
                offsets = np.concatenate([[0], np.cumsum(lengths)]).astype(np.int64)
                dtype = ref.var_length_attrs[attr]
                group.create_dataset(
                    attr, data=np.concatenate(column).astype(dtype, copy=False)
                )
                group.create_dataset(f"{attr}_offset", data=offsets)

            else:
                group.create_dataset(attr, data=np.asarray(column))
