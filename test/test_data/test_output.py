"""Test the reconstructed object data structure."""

import numpy as np
import pytest

from genprov.data import AttributionResult, Node, OutputObject


@pytest.fixture(name="obj")
def fixture_obj():
    """Builds an object with two leaf constituents."""
    leaves = [
        Node(id=0, pt=5.0, momentum=np.array([3.0, 4.0, 0.0, 10.0])),
        Node(id=1, pt=1.0, momentum=np.array([1.0, 0.0, 1.0, 5.0])),
    ]

    return OutputObject(
        id=0, pid=211, momentum=np.array([4.0, 4.0, 1.0, 15.0]), constituents=leaves
    )


class TestOutputObject:
    """Test the object attributes and provenance setters."""

    def test_defaults(self):
        """Provenance attributes are undefined before processing."""
        obj = OutputObject()

        assert obj.num_constituents == 0
        assert len(obj.particle_ids) == 0
        assert obj.particle_ids.dtype == np.int64
        assert np.isnan(obj.primary_fraction)
        assert np.isnan(obj.secondary_fraction)
        assert not obj.has_leading
        assert np.isnan(obj.leading_pt)

    def test_kinematics(self, obj):
        """Derived quantities are computed from the four-momentum."""
        assert obj.num_constituents == 2
        assert obj.pt == pytest.approx(np.sqrt(32.0))
        assert obj.energy == 15.0
        assert obj.mass == pytest.approx(np.sqrt(225.0 - 33.0))

    def test_set_particles(self, obj):
        """The flattened particles are stored as indexes."""
        obj.set_particles(obj.constituents[::-1])
        np.testing.assert_array_equal(obj.particle_ids, [1, 0])

    def test_set_attribution(self, obj):
        """The energy fractions are copied from the attribution."""
        obj.set_attribution(
            AttributionResult(
                primary=np.array([0.0, 0.0, 0.0, 3.0]),
                secondary=np.array([0.0, 0.0, 0.0, 1.0]),
            )
        )

        assert obj.primary_fraction == pytest.approx(0.75)
        assert obj.secondary_fraction == pytest.approx(0.25)

    def test_set_leading(self, obj):
        """The leading particle kinematics are stored."""
        obj.set_leading(obj.constituents[0])

        assert obj.has_leading
        assert obj.leading_pt == pytest.approx(5.0)
        assert obj.leading_eta == pytest.approx(0.0)
        assert obj.leading_phi == pytest.approx(np.arctan2(4.0, 3.0))
        assert obj.leading_energy == 10.0

    def test_set_leading_absent(self, obj):
        """An absent leading particle leaves its kinematics undefined."""
        obj.set_leading(obj.constituents[0])
        obj.set_leading(None)

        assert not obj.has_leading
        assert np.isnan(obj.leading_pt)
        assert np.isnan(obj.leading_energy)

    def test_scalar_dict(self, obj):
        """The particle list is only expanded if its length is provided."""
        obj.set_particles(obj.constituents)

        scalars = obj.scalar_dict()
        assert "particle_ids_0" not in scalars
        assert "constituents" not in scalars
        assert "has_leading" in scalars
        assert "primary_fraction" in scalars

        scalars = obj.scalar_dict(["particle_ids"], lengths={"particle_ids": 3})
        assert scalars == {
            "particle_ids_0": 0,
            "particle_ids_1": 1,
            "particle_ids_2": None,
        }

    def test_str(self, obj):
        """The string representation includes the number of constituents."""
        assert "Constituents: 2" in str(obj)
