"""Convert JSON / nested mappings into TreeNode trees.

Input nodes look like ``{"text": "...", "children": [...]}``. A missing
``children`` key means a leaf, and any non-string sequence of nodes is
accepted as ``children``. Unknown keys (``hash``, ``hash_label``, ...) are
ignored so that exporter output can be fed in as-is.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence

from merkle_graph.errors import MalformedTreeError
from merkle_graph.parser.model import TreeNode


def parse_tree_json(text: str) -> TreeNode:
    """Parse a JSON document describing a tree."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedTreeError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        # The json module itself recurses per nesting level
        raise MalformedTreeError("Invalid JSON: tree is nested too deeply to decode") from e
    return tree_from_dict(data)


def tree_from_dict(data: object) -> TreeNode:
    """Validate a nested mapping and build the equivalent TreeNode tree.

    Walks the input with an explicit stack so arbitrarily deep trees do not
    hit the interpreter's recursion limit. Raises MalformedTreeError naming
    the path of the first bad node found.
    """
    _check_node(data, "root")

    # First pass (pre-order): validate and remember each node's children
    order: list[tuple[Mapping, Sequence]] = []
    seen: set[int] = set()
    stack: list[tuple[Mapping, str]] = [(data, "root")]
    while stack:
        item, path = stack.pop()
        if id(item) in seen:
            raise MalformedTreeError(
                f"{path}: node object appears more than once (cycle or shared subtree)"
            )
        seen.add(id(item))
        if "children" not in item:
            raw_children = []
        else:
            raw_children = item["children"]
            if not isinstance(raw_children, Sequence) or isinstance(
                raw_children, (str, bytes)
            ):
                raise MalformedTreeError(
                    f"{path}: 'children' must be a sequence, "
                    f"got {type(raw_children).__name__}"
                )
        for i, child in enumerate(raw_children):
            _check_node(child, f"{path}.children[{i}]")
        order.append((item, raw_children))
        for i in range(len(raw_children) - 1, -1, -1):
            stack.append((raw_children[i], f"{path}.children[{i}]"))

    # Second pass (reverse pre-order): children are built before parents
    built: dict[int, TreeNode] = {}
    for item, raw_children in reversed(order):
        built[id(item)] = TreeNode(
            text=item["text"],
            children=tuple(built[id(c)] for c in raw_children),
        )
    return built[id(data)]


def tree_to_dict(node: TreeNode) -> dict:
    """Inverse of tree_from_dict."""
    out: dict = {"text": node.text, "children": []}
    stack = [(node, out)]
    while stack:
        current, target = stack.pop()
        for child in current.children:
            child_out = {"text": child.text, "children": []}
            target["children"].append(child_out)
            stack.append((child, child_out))
    return out


def _check_node(item: object, path: str) -> None:
    if not isinstance(item, Mapping):
        raise MalformedTreeError(
            f"{path}: expected an object with 'text' and 'children', "
            f"got {type(item).__name__}"
        )
    if "text" not in item:
        raise MalformedTreeError(f"{path}: missing 'text'")
    if not isinstance(item["text"], str):
        raise MalformedTreeError(
            f"{path}: 'text' must be a string, got {type(item['text']).__name__}"
        )


def validate_tree(root: object) -> TreeNode:
    """Check a hand-built TreeNode tree; return it unchanged if well formed."""
    if not isinstance(root, TreeNode):
        raise MalformedTreeError(f"root: expected a TreeNode, got {type(root).__name__}")
    stack: list[tuple[TreeNode, str]] = [(root, "root")]
    while stack:
        node, path = stack.pop()
        if not isinstance(node.text, str):
            raise MalformedTreeError(
                f"{path}: 'text' must be a string, got {type(node.text).__name__}"
            )
        for i, child in enumerate(node.children):
            if not isinstance(child, TreeNode):
                raise MalformedTreeError(
                    f"{path}.children[{i}]: expected a TreeNode, "
                    f"got {type(child).__name__}"
                )
            stack.append((child, f"{path}.children[{i}]"))
    return root
