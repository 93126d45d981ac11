"""Module with a data class object which holds an energy attribution."""

from dataclasses import dataclass

import numpy as np

from .base import DataBase

__all__ = ["AttributionResult"]


@dataclass(eq=False)
class AttributionResult(DataBase):
    """Decomposition of an object energy into primary and secondary parts.

    Each sum is the vector sum of the distinct generator-level particle
    four-momenta attributed to the primary or to the secondary (pileup)
    interactions.

    Attributes
    ----------
    primary : np.ndarray
        (4) Four-momentum sum of the primary-interaction particles
    secondary : np.ndarray
        (4) Four-momentum sum of the secondary-interaction particles
    num_primary : int
        Number of distinct particles summed into `primary`
    num_secondary : int
        Number of distinct particles summed into `secondary`
    primary_fraction : float
        Share of the energy attributed to the primary interaction, nan if
        the total energy is zero
    secondary_fraction : float
        Share of the energy attributed to secondary interactions, nan if
        the total energy is zero
    """

    primary: np.ndarray = None
    secondary: np.ndarray = None
    num_primary: int = 0
    num_secondary: int = 0
    primary_fraction: float = None
    secondary_fraction: float = None

    # Fixed-length attributes
    _fixed_length_attrs = (("primary", 4), ("secondary", 4))

    # Axis labels of the fixed-length attributes
    _vec_axes = (
        ("primary", ("px", "py", "pz", "e")),
        ("secondary", ("px", "py", "pz", "e")),
    )

    @property
    def total_energy(self):
        """Denominator of the energy fractions.

        Returns
        -------
        float
            Sum of the primary and secondary energies
        """
        return self.primary[3] + self.secondary[3]

    @property
    def is_defined(self):
        """Whether the energy fractions are defined (non-zero denominator).

        Returns
        -------
        bool
            `True` if the fractions are well defined
        """
        return bool(self.total_energy != 0.0)

    @property
    def primary_fraction(self):
        """Share of the energy attributed to the primary interaction.

        Returns
        -------
        float
            Primary energy fraction, nan if undefined
        """
        if not self.is_defined:
            return np.nan

        return float(self.primary[3] / self.total_energy)

    @primary_fraction.setter
    def primary_fraction(self, primary_fraction):
        pass

    @property
    def secondary_fraction(self):
        """Share of the energy attributed to secondary interactions.

        Returns
        -------
        float
            Secondary energy fraction, nan if undefined
        """
        if not self.is_defined:
            return np.nan

        return float(self.secondary[3] / self.total_energy)

    @secondary_fraction.setter
    def secondary_fraction(self, secondary_fraction):
        pass
