"""Module to write provenance records to CSV."""

import os

__all__ = ["CSVWriter"]


class CSVWriter:
    """Writes object records to CSV files.

    Builds one CSV table per object collection, with one row per object. It
    can only be used to store scalar quantities: fixed-length vectors are
    expanded into one column per component. Variable-length arrays (such as
    the flattened particle list) are skipped unless a fixed number of columns
    is provided for them through `lengths`.

    Typical configuration should look like:

    .. code-block:: yaml

        io:
          ...
          writer:
            name: csv
            file_name: provenance.csv
            keys:
              - pf_candidates
    """

    name = "csv"

    def __init__(
        self,
        file_name="provenance.csv",
        keys=("pf_candidates",),
        attrs=None,
        overwrite=False,
        append=False,
        accept_missing=False,
        lengths=None,
    ):
        """Initialize the basics of the output file(s).

        Parameters
        ----------
        file_name : str, default 'provenance.csv'
            Name of the output CSV file. If more than one collection is
            stored, the collection name is appended to the file name stem.
        keys : List[str], default ['pf_candidates']
            Object collections to store
        attrs : List[str], optional
            Object attributes to store. If not specified, store all of them
        overwrite : bool, default False
            If `True`, overwrite the output file(s) if they already exist
        append : bool, default False
            If `True`, add more rows to existing CSV file(s)
        accept_missing : bool, default False
            Tolerate missing columns
        lengths : Dict[str, int], optional
            Number of columns to store for each variable-length attribute,
            e.g. `{"particle_ids": 10}`. Shorter arrays are padded with `None`
        """
        # Build one file name per collection
        if isinstance(keys, str):
            keys = [keys]
        assert len(keys), "Must provide at least one object collection to store."
        if len(keys) == 1:
            self.file_names = {keys[0]: file_name}
        else:
            stem, ext = os.path.splitext(file_name)
            self.file_names = {k: f"{stem}_{k}{ext or '.csv'}" for k in keys}

        # Check that output files do not already exist, if requested
        if not overwrite and not append:
            for name in self.file_names.values():
                if os.path.isfile(name):
                    raise FileExistsError(f"File with name {name} already exists.")

        # Store persistent attributes
        self.keys = list(keys)
        self.attrs = attrs
        self.append_file = append
        self.accept_missing = accept_missing
        self.lengths = lengths
        self.result_keys = {}
        if self.append_file:
            for key, name in self.file_names.items():
                if not os.path.isfile(name):
                    raise FileNotFoundError(
                        f"File not found at path: {name}. When using "
                        "`append=True` in CSVWriter, the file must exist at "
                        "the prescribed path before data is written to it."
                    )

                with open(name, "r", encoding="utf-8") as out_file:
                    self.result_keys[key] = out_file.readline().strip().split(",")

    def __call__(self, data, cfg=None):
        """Writes the records of one entry.

        Parameters
        ----------
        data : dict
            Dictionary of data products
        cfg : dict, optional
            Complete configuration (not stored in CSV files)
        """
        for key in self.keys:
            if key not in data:
                raise KeyError(f"Object collection `{key}` not found in the entry.")

            for obj in data[key]:
                row = {"index": int(data["index"]), "key": key}
                row.update(obj.scalar_dict(self.attrs, self.lengths))
                self.append(key, row)

    def create(self, key, result_blob):
        """Initialize the header of a CSV file, record the columns to be stored.

        Parameters
        ----------
        key : str
            Object collection the file stores
        result_blob : dict
            Dictionary of column values of one row
        """
        # Save the list of columns to store
        self.result_keys[key] = list(result_blob.keys())

        # Create a header and write it to file
        with open(self.file_names[key], "w", encoding="utf-8") as out_file:
            header_str = ",".join(self.result_keys[key])
            out_file.write(header_str + "\n")

    def append(self, key, result_blob):
        """Append a row to the CSV file of an object collection.

        Parameters
        ----------
        key : str
            Object collection the row belongs to
        result_blob : dict
            Dictionary of column values of one row
        """
        # Fetch the values to store
        if key not in self.result_keys:
            # If this function has never been called, initialiaze the CSV file
            self.create(key, result_blob)

        else:
            # If it has, check that the list of columns is identical
            result_keys = self.result_keys[key]
            if list(result_blob.keys()) != result_keys:
                # If it is not identical, check the discrepancies
                missing = self.array_diff(result_keys, result_blob.keys())
                excess = self.array_diff(result_blob.keys(), result_keys)
                if len(excess):
                    raise AssertionError(
                        "There are columns in this row which were not "
                        "present when the CSV file was initialized. "
                        f"New columns: {list(excess)}"
                    )

                if len(missing) and not self.accept_missing:
                    raise AssertionError(
                        "There are columns missing in this row which were "
                        "present when the CSV file was initialized. "
                        f"Missing columns: {list(missing)}"
                    )

                new_result_blob = {k: -1 for k in result_keys}
                new_result_blob.update(result_blob)
                result_blob = new_result_blob

        # Append file
        with open(self.file_names[key], "a", encoding="utf-8") as out_file:
            result_str = ",".join(
                [str(result_blob[k]) for k in self.result_keys[key]]
            )
            out_file.write(result_str + "\n")

    @staticmethod
    def array_diff(array_x, array_y):
        """Returns the elements of the first array absent from the second.

        Parameters
        ----------
        array_x : List[str]
            First array of strings
        array_y : List[str]
            Second array of strings

        Returns
        -------
        Set[str]
            Set of keys that appear in `array_x` but not in `array_y`.
        """
        return set(array_x).difference(set(array_y))
