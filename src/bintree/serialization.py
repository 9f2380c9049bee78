"""
JSON form of a tree, mirroring the data model field for field::

    {"root": <node or null>, "count": <int>, "height": <int>}
    <node> = {"value": <JSON value>, "left": <node or null>, "right": <node or null>}

``to_json`` writes the compact form with non-ASCII text left as is, and
reading that text back with ``from_json`` and writing it again reproduces it
exactly. Both walk the document with an explicit stack, so a list-shaped tree
of any depth can be written and read. Only standard JSON is accepted or
produced: ``NaN`` and the infinities have no JSON spelling. Documents are
always read and written whole.
"""

import json
import re
from json.decoder import JSONDecodeError, scanstring
from typing import Any, Optional, Union

from bintree.node import Node
from bintree.tree import BinaryTree, IncomparableValueError, compare

TREE_FIELDS = ("root", "count", "height")
NODE_FIELDS = ("value", "left", "right")

# (parent path, field name) links, rendered only when reporting an error
_Path = Optional[tuple[Any, str]]

_WHITESPACE = re.compile(r"[ \t\n\r]*")


class SerializationError(ValueError):
    pass


class DeserializationError(ValueError):
    pass


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


_VALUE_ENCODER = json.JSONEncoder(
    separators=(",", ":"), ensure_ascii=False, allow_nan=False
)
_SCALAR_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def _subtree_to_dict(node: Node[Any]) -> dict[str, Any]:
    top = {"value": node.value, "left": None, "right": None}
    pending = [(node, top)]
    while pending:
        source, out = pending.pop()
        for side, child in (("left", source.left), ("right", source.right)):
            if child is not None:
                out[side] = {"value": child.value, "left": None, "right": None}
                pending.append((child, out[side]))
    return top


def to_dict(tree: BinaryTree[Any]) -> dict[str, Any]:
    root = tree.root_node
    return {
        "root": None if root is None else _subtree_to_dict(root),
        "count": tree.count(),
        "height": tree.height(),
    }


class BinaryTreeEncoder(json.JSONEncoder):
    """Encodes trees and nodes embedded in larger documents.

    ``json.dumps`` recurses into the nested node objects, so this is bound by
    the interpreter's recursion limit; use ``to_json`` for arbitrarily deep
    trees.
    """

    def default(self, obj: object) -> object:
        if isinstance(obj, BinaryTree):
            return to_dict(obj)
        if isinstance(obj, Node):
            return _subtree_to_dict(obj)
        return super().default(obj)


def _encode_value(value: Any) -> str:
    try:
        return _VALUE_ENCODER.encode(value)
    except (TypeError, ValueError) as err:
        raise SerializationError(f"cannot write {value!r} as JSON: {err}") from err


def to_json(tree: BinaryTree[Any]) -> str:
    root = tree.root_node
    parts = ['{"root":']
    # popped from the end: text fragments are emitted, nodes are expanded
    pending: list[Union[str, Node[Any]]] = [
        "}",
        str(tree.height()),
        ',"height":',
        str(tree.count()),
        ',"count":',
        "null" if root is None else root,
    ]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        parts.append('{"value":')
        parts.append(_encode_value(item.value))
        pending.append("}")
        pending.append("null" if item.right is None else item.right)
        pending.append(',"right":')
        pending.append("null" if item.left is None else item.left)
        pending.append(',"left":')
    return "".join(parts)


def _skip(text: str, idx: int) -> int:
    return _WHITESPACE.match(text, idx).end()  # type: ignore


def _read_key(text: str, idx: int) -> tuple[str, int]:
    if text[idx : idx + 1] != '"':
        raise JSONDecodeError(
            "Expecting property name enclosed in double quotes", text, idx
        )
    key, idx = scanstring(text, idx + 1)
    idx = _skip(text, idx)
    if text[idx : idx + 1] != ":":
        raise JSONDecodeError("Expecting ':' delimiter", text, idx)
    return key, _skip(text, idx + 1)


def _loads(text: str) -> Any:
    """Parse standard JSON like ``json.loads``, but without a nesting limit.

    Open objects and arrays are kept on an explicit stack; scalars are handed
    to the standard decoder.
    """
    # (open container, key the next value is stored under)
    stack: list[tuple[Union[dict[str, Any], list[Any]], str]] = []
    idx = _skip(text, 0)
    while True:
        char = text[idx : idx + 1]
        if char == "{":
            idx = _skip(text, idx + 1)
            if text[idx : idx + 1] == "}":
                value: Any = {}
                idx += 1
            else:
                key, idx = _read_key(text, idx)
                stack.append(({}, key))
                continue
        elif char == "[":
            idx = _skip(text, idx + 1)
            if text[idx : idx + 1] == "]":
                value = []
                idx += 1
            else:
                stack.append(([], ""))
                continue
        else:
            value, idx = _SCALAR_DECODER.raw_decode(text, idx)

        # store the finished value, closing every container it completes
        while True:
            idx = _skip(text, idx)
            if not stack:
                if idx != len(text):
                    raise JSONDecodeError("Extra data", text, idx)
                return value
            container, key = stack[-1]
            if isinstance(container, dict):
                container[key] = value
            else:
                container.append(value)
            char = text[idx : idx + 1]
            if char == ",":
                idx = _skip(text, idx + 1)
                if isinstance(container, dict):
                    key, idx = _read_key(text, idx)
                    stack[-1] = (container, key)
                break
            closer = "}" if isinstance(container, dict) else "]"
            if char != closer:
                raise JSONDecodeError(f"Expecting ',' or {closer!r}", text, idx)
            stack.pop()
            value = container
            idx += 1


def _render(path: _Path) -> str:
    parts = []
    while path is not None:
        path, name = path
        parts.append(name)
    return ".".join(reversed(parts)) or "document"


def _check_fields(
    doc: Any, fields: tuple[str, ...], *, required: tuple[str, ...], path: _Path
) -> None:
    if not isinstance(doc, dict):
        raise DeserializationError(
            f"{_render(path)}: expected an object, got {type(doc).__name__}"
        )
    missing = [f for f in required if f not in doc]
    if missing:
        raise DeserializationError(
            f"{_render(path)}: missing field{'s' * (len(missing) > 1)} "
            + ", ".join(map(repr, missing))
        )
    unknown = sorted(set(doc) - set(fields))
    if unknown:
        raise DeserializationError(
            f"{_render(path)}: unexpected field{'s' * (len(unknown) > 1)} "
            + ", ".join(map(repr, unknown))
        )


def _check_size(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise DeserializationError(
            f"{name}: expected a non-negative integer, got {value!r}"
        )
    return value


def _build_nodes(root: Any) -> Node[Any]:
    """Check every node of the document and build the matching nodes.

    The result is detached from any tree until the caller has also checked
    count and height.
    """
    _check_fields(root, NODE_FIELDS, required=NODE_FIELDS, path=(None, "root"))
    top: Node[Any] = Node(root["value"])
    # (node document, built node, lower bound, upper bound, path); bounds are
    # the documents of the nearest ancestors the node must sort after / before
    pending: list[tuple[Any, Node[Any], Any, Any, _Path]] = [
        (root, top, None, None, (None, "root"))
    ]
    while pending:
        doc, node, lower, upper, path = pending.pop()
        value = doc["value"]
        for bound, expected in ((lower, 1), (upper, -1)):
            if bound is None:
                continue
            try:
                order = compare(value, bound["value"])
            except IncomparableValueError as err:
                raise DeserializationError(f"{_render(path)}: {err}") from err
            if order == 0:
                raise DeserializationError(
                    f"{_render(path)}: duplicate value {value!r}"
                )
            if order != expected:
                relation = "greater" if expected == 1 else "less"
                raise DeserializationError(
                    f"{_render(path)}: value {value!r} must be {relation} than "
                    f"{bound['value']!r} to keep the search tree ordered"
                )
        for side, child_lower, child_upper in (
            ("right", doc, upper),
            ("left", lower, doc),
        ):
            child = doc[side]
            if child is None:
                continue
            child_path = (path, side)
            _check_fields(child, NODE_FIELDS, required=NODE_FIELDS, path=child_path)
            if side == "left":
                built = node.set_left(child["value"])
            else:
                built = node.set_right(child["value"])
            pending.append((child, built, child_lower, child_upper, child_path))
    return top


def from_dict(data: Any) -> BinaryTree[Any]:
    _check_fields(data, TREE_FIELDS, required=("root", "count"), path=None)
    count = _check_size("count", data["count"])
    expected_height = (
        _check_size("height", data["height"]) if "height" in data else None
    )

    root = None if data["root"] is None else _build_nodes(data["root"])
    tree = BinaryTree.from_root(root)
    if tree.count() != count:
        raise DeserializationError(
            f"count is {count} but the document holds {tree.count()} nodes"
        )
    if expected_height is not None and expected_height != tree.height():
        raise DeserializationError(
            f"height is {expected_height} but the longest path holds "
            f"{tree.height()} nodes"
        )
    return tree


def from_json(text: Union[str, bytes]) -> BinaryTree[Any]:
    try:
        if isinstance(text, (bytes, bytearray)):
            text = text.decode(json.detect_encoding(text), "surrogatepass")
        data = _loads(text)
    except ValueError as err:
        raise DeserializationError(f"invalid JSON: {err}") from err
    return from_dict(data)
