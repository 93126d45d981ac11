"""Contains a reader class dedicated to loading association graphs from HDF5."""

import h5py
import numpy as np
import yaml

from genprov.utils.logger import logger

from .base import ReaderBase

__all__ = ["HDF5Reader"]


class HDF5Reader(ReaderBase):
    """Class which reads association graphs stored in HDF5 files.

    The files must be structured as follows:
      - An `events` group with one subgroup per entry, named after the entry
        number within the file (`0`, `1`, ...)
      - Within each entry, one group per block of arrays: a `nodes` block
        which describes the association graph and one block per object
        collection (`pf_candidates`, `towers`, ...)
      - Optionally, an `info` group whose attributes store the `version` and
        the `cfg` used to produce the file

    The reader returns each entry as a dictionary which maps each block name
    onto a dictionary of arrays, to be built into objects downstream.
    """

    name = "hdf5"

    def __init__(
        self,
        file_keys,
        limit_num_files=None,
        max_print_files=10,
        n_entry=None,
        n_skip=None,
        entry_list=None,
        skip_entry_list=None,
    ):
        """Initalize the HDF5 file reader.

        Parameters
        ----------
        file_keys : Union[str, List[str]]
            Path or list of paths to the HDF5 files to be read
        limit_num_files : int, optional
            Integer limiting number of files to be taken per data directory
        max_print_files : int, default 10
            Maximum number of loaded file names to be printed
        n_entry : int, optional
            Maximum number of entries to load
        n_skip : int, optional
            Number of entries to skip at the beginning
        entry_list : list, optional
            List of integer entry IDs to add to the index
        skip_entry_list : list, optional
            List of integer entry IDs to skip from the index
        """
        # Process the list of files
        self.process_file_paths(file_keys, limit_num_files, max_print_files)

        # Loop over the input files, build a map from index to file ID
        self.num_entries = 0
        file_index = []
        self.file_offsets = np.empty(len(self.file_paths), dtype=np.int64)
        for i, path in enumerate(self.file_paths):
            with h5py.File(path, "r") as in_file:
                if "events" not in in_file:
                    raise KeyError(f"File does not contain an `events` group: {path}")

                num_entries = len(in_file["events"])
                file_index.append(np.full(num_entries, i, dtype=np.int64))
                self.file_offsets[i] = self.num_entries
                self.num_entries += num_entries

        # Dump the number of entries to load
        logger.info("Total number of entries in the file(s): %d\n", self.num_entries)

        # Concatenate the file indexes into one
        self.file_index = np.concatenate(file_index)

        # Process the entry list
        self.process_entry_list(n_entry, n_skip, entry_list, skip_entry_list)

        # Process the information about the production of the file
        self.cfg, self.version = self.process_info()

    def process_info(self):
        """Fetches the configuration and the version used to produce the file.

        Returns
        -------
        dict
            Configuration dictionary (`None` if not available)
        str
            Version tag (`None` if not available)
        """
        with h5py.File(self.file_paths[0], "r") as in_file:
            if "info" not in in_file:
                return None, None

            attrs = in_file["info"].attrs
            cfg = yaml.safe_load(attrs["cfg"]) if "cfg" in attrs else None
            version = attrs.get("version", None)

        return cfg, version

    def get(self, idx):
        """Returns a specific entry in the file.

        Parameters
        ----------
        idx : int
            Integer entry ID to access

        Returns
        -------
        data : dict
            Ditionary of data products corresponding to one event
        """
        # Get the appropriate entry index
        assert idx < len(self.entry_index), f"Entry {idx} out of range."
        file_idx = self.get_file_index(idx)
        entry_idx = self.get_file_entry_index(idx)

        # Load every block of arrays in the entry
        data = {"file_index": file_idx, "file_entry_index": entry_idx}
        with h5py.File(self.file_paths[file_idx], "r") as in_file:
            event = in_file["events"][str(entry_idx)]
            for key, block in event.items():
                data[key] = {name: block[name][()] for name in block.keys()}

        # Use the global index, not the one read from file
        data["index"] = np.int64(self.entry_index[idx])

        return data
