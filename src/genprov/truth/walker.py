"""Single traversal of the association graph shared by all operations.

The walker visits the direct constituents of an object in order and emits
every generator-level particle (leaf) they resolve to:
- Leaf constituent: emits the constituent itself
- Track-like constituent: emits its single child
- Tower-like constituent: emits, for each of its track-like children in
  order, that child's single child

What happens with each emitted leaf is delegated to a :class:`LeafVisitor`.
"""

from genprov.utils.enums import ShapeEnum

from .hierarchy import node_shape

__all__ = ["LeafVisitor", "walk"]


class LeafVisitor:
    """Base class of all per-leaf actions applied during a traversal.

    A new visitor is built for each object, so that all accumulated state is
    scoped to one traversal.
    """

    def enter_tower(self, tower):
        """Called at the start of each tower-like constituent.

        Parameters
        ----------
        tower : Node
            Tower-like constituent about to be traversed
        """

    def visit(self, leaf, source, shape):
        """Called for each emitted leaf.

        Parameters
        ----------
        leaf : Node
            Generator-level particle (provides the four-momentum)
        source : Node
            Node which carries the classification key of the leaf. This is
            the leaf itself, except within a tower where it is the
            intermediate track-like node.
        shape : ShapeEnum
            Shape of the constituent the leaf was reached through
        """
        raise NotImplementedError

    def result(self):
        """Returns the outcome of the traversal."""
        raise NotImplementedError


def walk(obj, visitor):
    """Traverses the constituents of an object, feeding leaves to a visitor.

    The graph is assumed to be acyclic. Malformed nodes never interrupt the
    traversal: a track-like node with several children only resolves to its
    first child and a childless node found within a tower is its own leaf.

    Parameters
    ----------
    obj : OutputObject
        Object whose constituents are traversed
    visitor : LeafVisitor
        Action to apply to each emitted leaf

    Returns
    -------
    object
        Result of the visitor
    """
    for constituent in obj.constituents:
        shape = node_shape(constituent)
        if shape == ShapeEnum.LEAF:
            visitor.visit(constituent, constituent, shape)

        elif shape == ShapeEnum.TRACK:
            leaf = constituent.children[0]
            visitor.visit(leaf, leaf, shape)

        else:
            visitor.enter_tower(constituent)
            for track in constituent.children:
                leaf = track.children[0] if track.children else track
                visitor.visit(leaf, track, shape)

    return visitor.result()
