"""Classification of association graph nodes by their child structure."""

from genprov.utils.enums import ShapeEnum

__all__ = ["classify", "is_well_formed", "node_shape"]


def classify(node):
    """Infers the shape of a node from its child structure.

    Only looks at the number of children of the node and the number of
    children of its first child:
    - No children: leaf
    - First child has no children: track-like
    - Otherwise: tower-like

    Nodes which do not strictly follow the nesting rules are assigned the
    most specific pattern they satisfy. This function never raises.

    Parameters
    ----------
    node : Node
        Association graph node

    Returns
    -------
    ShapeEnum
        Shape of the node
    """
    if not node.children:
        return ShapeEnum.LEAF
    if not node.children[0].children:
        return ShapeEnum.TRACK

    return ShapeEnum.TOWER


def is_well_formed(node):
    """Checks that a node strictly follows the nesting rules of its shape.

    A track-like node must have exactly one child, itself a leaf. All the
    children of a tower-like node must be track-like.

    Parameters
    ----------
    node : Node
        Association graph node

    Returns
    -------
    bool
        `True` if the node matches one of the three shapes exactly
    """
    shape = classify(node)
    if shape == ShapeEnum.LEAF:
        return True
    if shape == ShapeEnum.TRACK:
        return len(node.children) == 1

    return all(
        len(child.children) == 1 and not child.children[0].children
        for child in node.children
    )


def node_shape(node):
    """Returns the shape of a node, inferring it if it was never tagged.

    Parameters
    ----------
    node : Node
        Association graph node

    Returns
    -------
    ShapeEnum
        Shape of the node
    """
    if node.shape != ShapeEnum.UNKNOWN:
        return ShapeEnum(node.shape)

    return classify(node)
