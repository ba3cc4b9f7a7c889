"""Tree input model and JSON loading."""

from merkle_graph.parser.model import (
    Link,
    Orientation,
    PositionedNode,
    TreeLayout,
    TreeNode,
)
from merkle_graph.parser.tree_json import (
    parse_tree_json,
    tree_from_dict,
    tree_to_dict,
    validate_tree,
)

__all__ = [
    "Link",
    "Orientation",
    "PositionedNode",
    "TreeLayout",
    "TreeNode",
    "parse_tree_json",
    "tree_from_dict",
    "tree_to_dict",
    "validate_tree",
]
