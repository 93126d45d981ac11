"""Test the post-processor manager."""

import numpy as np
import pytest

from genprov.construct import BuildManager
from genprov.post import PostManager


class TestPostManager:
    """Test the PostManager functionality."""

    def test_run(self, entries):
        """Post-processors are instantiated by name and run on each entry."""
        data = dict(entries[0], index=0)
        BuildManager()(data)

        manager = PostManager({"provenance": {"flatten_keys": ["towers"]}})
        manager(data)

        np.testing.assert_array_equal(data["pf_candidates"][0].particle_ids, [0, 1])
        assert manager.watch.time("provenance").wall >= 0.0

    def test_alias(self):
        """Post-processors can be requested under their aliases."""
        manager = PostManager({"fill_particles": None, "provenance": {"priority": 1}})
        assert list(manager.modules.keys()) == ["provenance", "fill_particles"]

    def test_unknown(self):
        """Unknown post-processors are rejected."""
        with pytest.raises(ValueError):
            PostManager({"bogus": {}})
