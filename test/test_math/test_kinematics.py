"""Test the four-vector kinematics routines."""

import numpy as np
import pytest

from genprov.math import kinematics
from genprov.utils.globals import BEAM_AXIS_ETA, RECORD_BEAM_AXIS_ETA


class TestTransverse:
    """Test the transverse quantities."""

    def test_pt(self):
        """Transverse momentum only depends on px and py."""
        p4 = np.array([3.0, 4.0, 12.0, 13.0])
        assert kinematics.pt(p4) == pytest.approx(5.0)

    def test_phi(self):
        """Azimuthal angle follows the arctan2 convention."""
        assert kinematics.phi(np.array([0.0, 1.0, 0.0, 1.0])) == pytest.approx(
            np.pi / 2
        )
        assert kinematics.phi(np.array([-1.0, 0.0, 0.0, 1.0])) == pytest.approx(np.pi)

    def test_phi_null(self):
        """A vector with no transverse component has a null azimuthal angle."""
        assert kinematics.phi(np.array([0.0, 0.0, 5.0, 5.0])) == 0.0


class TestPseudorapidity:
    """Test the pseudorapidity conventions."""

    def test_transverse_plane(self):
        """A vector in the transverse plane has a null pseudorapidity."""
        assert kinematics.pseudorapidity(np.array([1.0, 1.0, 0.0, 2.0])) == 0.0

    def test_value(self):
        """Pseudorapidity matches asinh(pz/pt)."""
        p4 = np.array([1.0, 0.0, 1.0, 2.0])
        assert kinematics.pseudorapidity(p4) == pytest.approx(np.arcsinh(1.0))
        p4 = np.array([0.0, 2.0, -3.0, 4.0])
        assert kinematics.pseudorapidity(p4) == pytest.approx(np.arcsinh(-1.5))

    def test_beam_axis(self):
        """Vectors along the beam axis are assigned a large finite value."""
        assert kinematics.pseudorapidity(np.array([0.0, 0.0, 2.0, 2.0])) == (
            BEAM_AXIS_ETA
        )
        assert kinematics.pseudorapidity(np.array([0.0, 0.0, -2.0, 2.0])) == (
            -BEAM_AXIS_ETA
        )

    def test_null(self):
        """A null vector has a null pseudorapidity."""
        assert kinematics.pseudorapidity(np.zeros(4)) == 0.0

    def test_record_eta(self):
        """Records store beam-axis vectors with a dedicated value."""
        assert kinematics.record_eta(np.array([0.0, 0.0, 2.0, 2.0])) == (
            RECORD_BEAM_AXIS_ETA
        )
        assert kinematics.record_eta(np.array([0.0, 0.0, -2.0, 2.0])) == (
            -RECORD_BEAM_AXIS_ETA
        )
        assert kinematics.record_eta(np.zeros(4)) == RECORD_BEAM_AXIS_ETA

        p4 = np.array([1.0, 0.0, 1.0, 2.0])
        assert kinematics.record_eta(p4) == kinematics.pseudorapidity(p4)


class TestMass:
    """Test the invariant mass."""

    def test_timelike(self):
        """A particle at rest has a mass equal to its energy."""
        assert kinematics.mass(np.array([0.0, 0.0, 0.0, 5.0])) == pytest.approx(5.0)

    def test_spacelike(self):
        """A space-like vector is assigned a negative mass."""
        assert kinematics.mass(np.array([3.0, 4.0, 0.0, 0.0])) == pytest.approx(-5.0)


class TestConversions:
    """Test the coordinate conversions."""

    def test_pt_eta_phi_e(self):
        """Converts a cartesian vector to (pt, eta, phi, E)."""
        out = kinematics.pt_eta_phi_e(np.array([0.0, 2.0, 0.0, 4.0]))
        np.testing.assert_allclose(out, [2.0, 0.0, np.pi / 2, 4.0])

    def test_to_seconds(self):
        """A time of c x 1 s expressed in mm/c is one second."""
        t = 2.99792458e8 * 1e3
        assert kinematics.to_seconds(t) == pytest.approx(1.0)
