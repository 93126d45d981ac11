"""Test the flattening of objects to generator-level particles."""

from genprov.truth import flatten


class TestFlatten:
    """Test the order and multiplicity of the flattened particles."""

    def test_order(self, graph):
        """Particles are listed in constituent order, then child order."""
        leaf = graph.leaf(1.0)
        p = graph.leaf(2.0)
        q = graph.leaf(3.0)
        r = graph.leaf(4.0)
        obj = graph.obj(
            leaf, graph.track(p), graph.tower(graph.track(q), graph.track(r))
        )

        assert flatten(obj) == [leaf, p, q, r]

    def test_identity(self, graph):
        """The flattened particles are the graph nodes themselves."""
        p = graph.leaf(2.0)
        result = flatten(graph.obj(graph.track(p)))
        assert result[0] is p

    def test_empty(self, graph):
        """An object with no constituents flattens to nothing."""
        assert flatten(graph.obj()) == []

    def test_duplicates(self, graph):
        """A particle reached twice is listed twice."""
        p = graph.leaf(2.0)
        track = graph.track(p)
        obj = graph.obj(track, graph.tower(track), p)

        assert flatten(obj) == [p, p, p]

    def test_idempotent(self, graph):
        """Flattening twice yields the same sequence."""
        p, q = graph.leaf(2.0), graph.leaf(3.0)
        obj = graph.obj(graph.tower(graph.track(p), graph.track(q)), p)

        assert flatten(obj) == flatten(obj)

    def test_malformed_track(self, graph):
        """A track-like node with several children resolves to its first."""
        p, q = graph.leaf(2.0), graph.leaf(3.0)
        assert flatten(graph.obj(graph.track(p, q))) == [p]

    def test_malformed_tower(self, graph):
        """A childless node within a tower is its own particle."""
        p, q = graph.leaf(2.0), graph.leaf(3.0)
        assert flatten(graph.obj(graph.tower(graph.track(p), q))) == [p, q]
