"""Module with a data class object which represents an association graph node.

Nodes come in three shapes (see :class:`genprov.utils.enums.ShapeEnum`):
- Leaf: a generator-level particle, with no children
- Track: an association entry with exactly one child, itself a leaf
- Tower: an association entry whose children are all track-like
"""

from dataclasses import dataclass

import numpy as np

from genprov.math import kinematics
from genprov.utils.globals import SHAPE_LABELS, UNKWN_SHP

from .base import DataBase

__all__ = ["Node"]


@dataclass(eq=False)
class Node(DataBase):
    """Association graph node information.

    A node only holds non-owning references to its children: the lifetime of
    the node and of its children is bound to the store which built them.

    Attributes
    ----------
    id : int
        Index of the node in the association graph
    pid : int
        Particle type code (PDG code for generator-level particles)
    is_pu : bool
        Whether the node originates from a secondary (pileup) interaction
    pt : float
        Cached transverse momentum scalar. This is provided upstream and may
        differ numerically from the transverse momentum derived from
        `momentum`.
    momentum : np.ndarray
        (4) Four-momentum (px, py, pz, E)
    position : np.ndarray
        (4) Four-position (x, y, z, t)
    shape : int
        Shape of the node, as assigned by the association graph store
    children : List[Node]
        Ordered list of child nodes
    momentum_pt : float
        Transverse momentum derived from the four-momentum
    eta : float
        Pseudorapidity of the four-momentum (+/-999.9 along the beam axis)
    phi : float
        Azimuthal angle of the four-momentum
    energy : float
        Energy component of the four-momentum
    mass : float
        Invariant mass of the four-momentum
    t : float
        Time coordinate of the four-position, in seconds
    """

    id: int = -1
    pid: int = -1
    is_pu: bool = False
    pt: float = -1.0
    momentum: np.ndarray = None
    position: np.ndarray = None
    shape: int = UNKWN_SHP
    children: list = None
    momentum_pt: float = None
    eta: float = None
    phi: float = None
    energy: float = None
    mass: float = None
    t: float = None

    # Fixed-length attributes
    _fixed_length_attrs = (("momentum", 4), ("position", 4))

    # Axis labels of the fixed-length attributes
    _vec_axes = (
        ("momentum", ("px", "py", "pz", "e")),
        ("position", ("x", "y", "z", "t")),
    )

    # Boolean attributes
    _bool_attrs = ("is_pu",)

    # Attributes which hold references to other nodes
    _ref_attrs = ("children",)

    def __str__(self):
        """Human-readable string representation of the node object.

        Results
        -------
        str
            Basic information about the node properties
        """
        shape_label = SHAPE_LABELS.get(self.shape, SHAPE_LABELS[UNKWN_SHP])
        return (
            f"Node(ID: {self.id:<4} | Shape: {shape_label:<7} | PID: {self.pid:<6} "
            f"| PU: {self.is_pu:<1} | PT: {self.pt:<8.3f} "
            f"| Children: {len(self.children)})"
        )

    @property
    def num_children(self):
        """Number of children of this node.

        Returns
        -------
        int
            Number of child references
        """
        return len(self.children)

    @property
    def momentum_pt(self):
        """Transverse momentum derived from the four-momentum.

        Returns
        -------
        float
            Transverse momentum
        """
        return kinematics.pt(self.momentum)

    @momentum_pt.setter
    def momentum_pt(self, momentum_pt):
        pass

    @property
    def eta(self):
        """Pseudorapidity of the four-momentum, as stored in records.

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
        """Azimuthal angle of the four-momentum.

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
        """Energy component of the four-momentum.

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
        """Invariant mass of the four-momentum.

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

    @property
    def kinematic_key(self):
        """Kinematic key of the node four-momentum.

        Two nodes share a kinematic key if their (pt, eta, phi, E) values
        are exactly identical.

        Returns
        -------
        Tuple[float]
            (pt, eta, phi, E) of the four-momentum
        """
        return tuple(float(v) for v in kinematics.pt_eta_phi_e(self.momentum))
