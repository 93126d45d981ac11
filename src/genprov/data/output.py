"""Module with a data class object which represents a reconstructed object.

An output object (particle-flow candidate, tower, photon, jet, ...) is the
unit of analysis of the provenance engine. It holds an ordered list of direct
constituents in the association graph and, once processed, the provenance
information derived from them.
"""

from dataclasses import dataclass

import numpy as np

from genprov.math import kinematics

from .base import DataBase

__all__ = ["OutputObject"]


@dataclass(eq=False)
class OutputObject(DataBase):
    """Reconstructed object information.

    Attributes
    ----------
    id : int
        Index of the object in its collection
    pid : int
        Reconstructed particle type code
    momentum : np.ndarray
        (4) Four-momentum (px, py, pz, E)
    position : np.ndarray
        (4) Four-position (x, y, z, t)
    constituents : List[Node]
        Ordered list of direct constituents in the association graph
    particle_ids : np.ndarray
        (P) Indexes of the generator-level particles the object flattens to
    primary_fraction : float
        Share of the energy attributed to the primary interaction (nan if
        undefined)
    secondary_fraction : float
        Share of the energy attributed to secondary (pileup) interactions (nan
        if undefined)
    has_leading : bool
        Whether a leading generator-level particle was found
    leading_pt : float
        Transverse momentum of the leading particle (nan if absent)
    leading_eta : float
        Pseudorapidity of the leading particle (nan if absent)
    leading_phi : float
        Azimuthal angle of the leading particle (nan if absent)
    leading_energy : float
        Energy of the leading particle (nan if absent)
    num_constituents : int
        Number of direct constituents
    pt : float
        Transverse momentum of the object
    eta : float
        Pseudorapidity of the object (+/-999.9 along the beam axis)
    phi : float
        Azimuthal angle of the object
    energy : float
        Energy of the object
    mass : float
        Invariant mass of the object
    t : float
        Time coordinate of the four-position, in seconds
    """

    id: int = -1
    pid: int = -1
    momentum: np.ndarray = None
    position: np.ndarray = None
    constituents: list = None
    particle_ids: np.ndarray = None
    primary_fraction: float = np.nan
    secondary_fraction: float = np.nan
    has_leading: bool = False
    leading_pt: float = np.nan
    leading_eta: float = np.nan
    leading_phi: float = np.nan
    leading_energy: float = np.nan
    num_constituents: int = None
    pt: float = None
    eta: float = None
    phi: float = None
    energy: float = None
    mass: float = None
    t: float = None

    # Fixed-length attributes
    _fixed_length_attrs = (("momentum", 4), ("position", 4))

    # Variable-length attributes
    _var_length_attrs = (("particle_ids", np.int64),)

    # Axis labels of the fixed-length attributes
    _vec_axes = (
        ("momentum", ("px", "py", "pz", "e")),
        ("position", ("x", "y", "z", "t")),
    )

    # Boolean attributes
    _bool_attrs = ("has_leading",)

    # Attributes which hold references to graph nodes
    _ref_attrs = ("constituents",)

    def __str__(self):
        """Human-readable string representation of the object.

        Results
        -------
        str
            Basic information about the object properties
        """
        return (
            f"OutputObject(ID: {self.id:<4} | PID: {self.pid:<6} "
            f"| PT: {self.pt:<8.3f} | Constituents: {self.num_constituents:<3} "
            f"| Particles: {len(self.particle_ids)})"
        )

    def set_particles(self, particles):
        """Stores the flattened list of generator-level particles.

        Parameters
        ----------
        particles : List[Node]
            Ordered list of leaves the object flattens to
        """
        self.particle_ids = np.array([p.id for p in particles], dtype=np.int64)

    def set_attribution(self, attribution):
        """Stores the primary/secondary energy decomposition.

        Parameters
        ----------
        attribution : AttributionResult
            Result of the attribution of the object energy
        """
        self.primary_fraction = attribution.primary_fraction
        self.secondary_fraction = attribution.secondary_fraction

    def set_leading(self, leading):
        """Stores the kinematics of the leading generator-level particle.

        Parameters
        ----------
        leading : Node, optional
            Leading particle, `None` if there is none
        """
        self.has_leading = leading is not None
        if leading is None:
            self.leading_pt = np.nan
            self.leading_eta = np.nan
            self.leading_phi = np.nan
            self.leading_energy = np.nan
        else:
            self.leading_pt = leading.momentum_pt
            self.leading_eta = kinematics.pseudorapidity(leading.momentum)
            self.leading_phi = leading.phi
            self.leading_energy = float(leading.energy)

    @property
    def num_constituents(self):
        """Number of direct constituents of the object.

        Returns
        -------
        int
            Number of constituents
        """
        return len(self.constituents)

    @num_constituents.setter
    def num_constituents(self, num_constituents):
        pass

    @property
    def pt(self):
        """Transverse momentum of the object.

        Returns
        -------
        float
            Transverse momentum
        """
        return kinematics.pt(self.momentum)

    @pt.setter
    def pt(self, pt):
        pass

    @property
    def eta(self):
        """Pseudorapidity of the object, as stored in records.

        Returns
        -------
        float
            Pseudorapidity
        """
        return kinematics.record_eta(self.momentum)

    @eta.setter
    def eta(self, eta):
        pass

    @property
    def phi(self):
        """Azimuthal angle of the object.

        Returns
        -------
        float
            Azimuthal angle in [-pi, pi]
        """
        return kinematics.phi(self.momentum)

    @phi.setter
    def phi(self, phi):
        pass

    @property
    def energy(self):
        """Energy of the object.

        Returns
        -------
        float
            Energy
        """
        return self.momentum[3]

    @energy.setter
    def energy(self, energy):
        pass

    @property
    def mass(self):
        """Invariant mass of the object.

        Returns
        -------
        float
            Invariant mass (negative for space-like four-momenta)
        """
        return kinematics.mass(self.momentum)

    @mass.setter
    def mass(self, mass):
        pass

    @property
    def t(self):
        """Time coordinate of the four-position.

        Returns
        -------
        float
            Time in seconds
        """
        return kinematics.to_seconds(self.position[3])

    @t.setter
    def t(self, t):
        pass
