"""Numba JIT compiled implementation of four-vector kinematics.

Four-momenta are stored as `(px, py, pz, E)` and four-positions as
`(x, y, z, t)`. The conventions follow ROOT's `TLorentzVector`, so that
quantities derived here compare exactly with the ones produced upstream.
"""

import numba as nb
import numpy as np

from genprov.utils.globals import BEAM_AXIS_ETA, RECORD_BEAM_AXIS_ETA, SPEED_OF_LIGHT

__all__ = [
    "pt",
    "pseudorapidity",
    "phi",
    "mass",
    "cos_theta",
    "pt_eta_phi_e",
    "record_eta",
    "to_seconds",
]


@nb.njit(cache=True)
def pt(p4: nb.float64[:]) -> nb.float64:
    """Transverse momentum of a four-vector.

    Parameters
    ----------
    p4 : np.ndarray
        (4) Four-vector (px, py, pz, E)

    Returns
    -------
    float
        Transverse momentum
    """
    return np.sqrt(p4[0] * p4[0] + p4[1] * p4[1])


@nb.njit(cache=True)
def cos_theta(p4: nb.float64[:]) -> nb.float64:
    """Cosine of the polar angle of a four-vector.

    A null three-vector is considered to be aligned with the beam axis.

    Parameters
    ----------
    p4 : np.ndarray
        (4) Four-vector (px, py, pz, E)

    Returns
    -------
    float
        Cosine of the polar angle
    """
    p = np.sqrt(p4[0] * p4[0] + p4[1] * p4[1] + p4[2] * p4[2])
    if p == 0.0:
        return 1.0

    return p4[2] / p


@nb.njit(cache=True)
def pseudorapidity(p4: nb.float64[:]) -> nb.float64:
    """Pseudorapidity of a four-vector.

    Vectors along the beam axis are assigned `+/-1e11`, a null vector is
    assigned 0.

    Parameters
    ----------
    p4 : np.ndarray
        (4) Four-vector (px, py, pz, E)

    Returns
    -------
    float
        Pseudorapidity
    """
    cos = cos_theta(p4)
    if cos * cos < 1.0:
        return -0.5 * np.log((1.0 - cos) / (1.0 + cos))
    if p4[2] == 0.0:
        return 0.0
    if p4[2] > 0.0:
        return BEAM_AXIS_ETA

    return -BEAM_AXIS_ETA


@nb.njit(cache=True)
def phi(p4: nb.float64[:]) -> nb.float64:
    """Azimuthal angle of a four-vector in [-pi, pi].

    Parameters
    ----------
    p4 : np.ndarray
        (4) Four-vector (px, py, pz, E)

    Returns
    -------
    float
        Azimuthal angle
    """
    if p4[0] == 0.0 and p4[1] == 0.0:
        return 0.0

    return np.arctan2(p4[1], p4[0])


@nb.njit(cache=True)
def mass(p4: nb.float64[:]) -> nb.float64:
    """Invariant mass of a four-vector, negative for space-like vectors.

    Parameters
    ----------
    p4 : np.ndarray
        (4) Four-vector (px, py, pz, E)

    Returns
    -------
    float
        Invariant mass
    """
    m2 = p4[3] * p4[3] - (p4[0] * p4[0] + p4[1] * p4[1] + p4[2] * p4[2])
    if m2 < 0.0:
        return -np.sqrt(-m2)

    return np.sqrt(m2)


@nb.njit(cache=True)
def pt_eta_phi_e(p4: nb.float64[:]) -> nb.float64[:]:
    """Converts a cartesian four-momentum to (pt, eta, phi, E).

    Parameters
    ----------
    p4 : np.ndarray
        (4) Four-vector (px, py, pz, E)

    Returns
    -------
    np.ndarray
        (4) Vector of (pt, eta, phi, E)
    """
    out = np.empty(4, dtype=np.float64)
    out[0] = pt(p4)
    out[1] = pseudorapidity(p4)
    out[2] = phi(p4)
    out[3] = p4[3]

    return out


@nb.njit(cache=True)
def record_eta(p4: nb.float64[:]) -> nb.float64:
    """Pseudorapidity as it is stored in output records.

    Vectors exactly along the beam axis are stored as `+/-999.9` (sign of
    pz, positive when pz is 0) instead of the `+/-1e11` convention.

    Parameters
    ----------
    p4 : np.ndarray
        (4) Four-vector (px, py, pz, E) or four-position (x, y, z, t)

    Returns
    -------
    float
        Pseudorapidity of the vector
    """
    if abs(cos_theta(p4)) == 1.0:
        if p4[2] >= 0.0:
            return RECORD_BEAM_AXIS_ETA
        return -RECORD_BEAM_AXIS_ETA

    return pseudorapidity(p4)


@nb.njit(cache=True)
def to_seconds(t: nb.float64) -> nb.float64:
    """Converts a position time expressed in mm/c into seconds.

    Parameters
    ----------
    t : float
        Time coordinate in mm/c

    Returns
    -------
    float
        Time in s
    """
    return t * 1.0e-3 / SPEED_OF_LIGHT
