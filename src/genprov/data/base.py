"""Module with a parent class of all data structures."""

from dataclasses import dataclass, fields

import numpy as np


@dataclass(eq=False)
class DataBase:
    """Base class of all data structures.

    Defines basic methods shared by all data structures.
    """

    # Fixed-length (float) attributes as (key, size) pairs
    _fixed_length_attrs = ()

    # Variable-length attributes as (key, dtype) pairs
    _var_length_attrs = ()

    # Axis labels used to expand fixed-length attributes as (key, axes) pairs
    _vec_axes = ()

    # Boolean attributes
    _bool_attrs = ()

    # Attributes which hold references to other objects
    _ref_attrs = ()

    def __post_init__(self):
        """Immediately called after building the class attributes.

        Provides three functions:
        - Gives default values to array-like attributes. If a default value was
          provided in the attribute definition, all instances of this class
          would point to the same memory location.
        - Gives default (empty) lists to reference attributes.
        - Casts booleans when they are provided in the format one
          gets when loading them from HDF5 files.
        """
        # Provide default values to the variable-length array attributes
        for attr, dtype in self._var_length_attrs:
            if getattr(self, attr) is None:
                setattr(self, attr, np.empty(0, dtype=dtype))

        # Provide default values (null vectors) to the fixed-length attributes
        for attr, size in self._fixed_length_attrs:
            if getattr(self, attr) is None:
                setattr(self, attr, np.zeros(size, dtype=np.float64))
            else:
                setattr(self, attr, np.asarray(getattr(self, attr), dtype=np.float64))

        # Provide default values to the reference attributes
        for attr in self._ref_attrs:
            if getattr(self, attr) is None:
                setattr(self, attr, [])

        # Cast stored integers back to booleans
        for attr in self._bool_attrs:
            if isinstance(getattr(self, attr), (np.bool_, np.integer)):
                setattr(self, attr, bool(getattr(self, attr)))

    def __eq__(self, other):
        """Checks that all attributes of two class instances are the same.

        This overloads the default dataclass `__eq__` method to include an
        appopriate check for vector (numpy) attributes. Reference attributes
        are equal if they point to the same objects.

        Parameters
        ----------
        other : obj
            Other instance of the same object class

        Returns
        -------
        bool
            `True` if all attributes of both objects are identical
        """
        # Check that the two objects belong to the same class
        if self.__class__ != other.__class__:
            return False

        # Check that all base attributes are identical
        for k, v in self.__dict__.items():
            v_other = getattr(other, k)
            if k in self._ref_attrs:
                # For references, check identity of the referenced objects
                if len(v) != len(v_other) or any(
                    a is not b for a, b in zip(v, v_other)
                ):
                    return False

            elif np.isscalar(v) or v is None:
                # For scalars, regular comparison will do (nan is nan)
                if v != v_other and not (v != v and v_other != v_other):
                    return False

            else:
                # For vectors, compare all elements
                if v.shape != v_other.shape or (v_other != v).any():
                    return False

        return True

    __hash__ = object.__hash__

    def as_dict(self):
        """Returns the data class as dictionary of (key, value) pairs.

        Reference attributes are not included, as they cannot be stored to
        file.

        Returns
        -------
        dict
            Dictionary of attribute names and their values
        """
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in self._ref_attrs
        }

    def scalar_dict(self, attrs=None, lengths=None):
        """Returns the data class attributes as a dictionary of scalars.

        This is useful when storing data classes in CSV files, which expect
        a single scalar per column in the table.

        Parameters
        ----------
        attrs : List[str], optional
            List of attribute names to include in the dictionary. If not
            specified, all the keys are included.
        lengths : Dict[str, int], optional
            Specifies the length of variable-length attributes
        """
        # Loop over the attributes of the data class
        lengths = lengths or {}
        vec_axes = dict(self._vec_axes)
        scalar_dict, found = {}, []
        for attr, value in self.as_dict().items():
            # If the attribute is not requested, skip
            if attrs is not None and attr not in attrs:
                continue
            found.append(attr)

            # Dispatch
            if np.isscalar(value):
                # If the attribute is a scalar, store as is
                scalar_dict[attr] = value

            elif attr in vec_axes:
                # If the attribute is a vector, expand with axis labels
                for axis, v in zip(vec_axes[attr], value):
                    scalar_dict[f"{attr}_{axis}"] = v

            elif attr in self.fixed_length_attrs:
                # If the attribute is a fixed-length array, expand with index
                for i, v in enumerate(value):
                    scalar_dict[f"{attr}_{i}"] = v

            elif attr in self.var_length_attrs:
                if attr in lengths:
                    # If the attribute is a variable-length array with a length
                    # provided, resize it to match that length and store it
                    for i in range(lengths[attr]):
                        scalar_dict[f"{attr}_{i}"] = (
                            value[i] if i < len(value) else None
                        )

                else:
                    # If the attribute is a variable-length array of
                    # indeterminate length, do not store it
                    assert attrs is None or attr not in attrs, (
                        f"Cannot cast {attr} to scalars. To cast a variable-"
                        "length array, must provide a fixed length."
                    )

            else:
                raise ValueError(
                    f"Cannot expand the `{attr}` attribute of "
                    f"`{self.__class__.__name__}` to scalar values."
                )

        if attrs is not None and len(attrs) != len(found):
            class_name = self.__class__.__name__
            miss = list(set(attrs).difference(set(found)))
            raise AttributeError(
                f"Attribute(s) {miss} do(es) not appear in {class_name}."
            )

        return scalar_dict

    @property
    def fixed_length_attrs(self):
        """Fetches the dictionary of fixed-length array attributes.

        Returns
        -------
        Dict[str, int]
            Dictionary which maps fixed-length attributes onto their length
        """
        return dict(self._fixed_length_attrs)

    @property
    def var_length_attrs(self):
        """Fetches the dictionary of variable-length array attributes.

        Returns
        -------
        Dict[str, type]
            Dictionary which maps variable-length attributes onto their type
        """
        return dict(self._var_length_attrs)
