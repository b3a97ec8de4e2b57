"""JSON Patch (RFC 6902) decoding and application on plain Python data."""

from __future__ import annotations

import copy
import json
import re
from typing import Any

__all__ = ["JSONPatchError", "decode_patch", "apply_patch"]

_OPS = frozenset({"add", "remove", "replace", "move", "copy", "test"})
_INDEX = re.compile(r"0|[1-9][0-9]*")


class JSONPatchError(ValueError):
    """Raised when a patch is malformed or cannot be applied."""


def decode_patch(text: str | bytes) -> list[dict[str, Any]]:
    """Parse a JSON patch document into a list of operations."""
    try:
        operations = json.loads(text)
    except (ValueError, TypeError) as exc:
        raise JSONPatchError(f"invalid patch document: {exc}") from exc
    if not isinstance(operations, list):
        raise JSONPatchError("patch document must be a JSON array")
    for operation in operations:
        if not isinstance(operation, dict):
            raise JSONPatchError(f"patch operation must be an object: {operation!r}")
        op = operation.get("op")
        if op not in _OPS:
            raise JSONPatchError(f"unsupported patch operation: {op!r}")
        if not isinstance(operation.get("path"), str):
            raise JSONPatchError(f"operation {op!r} is missing a path")
        if op in ("add", "replace", "test") and "value" not in operation:
            raise JSONPatchError(f"operation {op!r} is missing a value")
        if op in ("move", "copy") and not isinstance(operation.get("from"), str):
            raise JSONPatchError(f"operation {op!r} is missing from")
    return operations


def apply_patch(document: Any, operations: list[dict[str, Any]]) -> Any:
    """Return a copy of ``document`` with ``operations`` applied in order."""
    result = copy.deepcopy(document)
    for operation in operations:
        result = _apply_one(result, operation)
    return result


def _parse_pointer(path: str) -> list[str]:
    if path == "":
        return []
    if not path.startswith("/"):
        raise JSONPatchError(f"invalid JSON pointer: {path!r}")
    return [t.replace("~1", "/").replace("~0", "~") for t in path[1:].split("/")]


def _index(token: str, size: int, allow_end: bool) -> int:
    if allow_end and token == "-":
        return size
    if not _INDEX.fullmatch(token):
        raise JSONPatchError(f"invalid array index: {token!r}")
    index = int(token)
    limit = size if allow_end else size - 1
    if index > limit:
        raise JSONPatchError(f"array index out of range: {index}")
    return index


def _child(container: Any, token: str) -> Any:
    if isinstance(container, dict):
        if token not in container:
            raise JSONPatchError(f"missing key: {token!r}")
        return container[token]
    if isinstance(container, list):
        return container[_index(token, len(container), False)]
    raise JSONPatchError(f"cannot traverse into scalar with {token!r}")


def _parent(document: Any, tokens: list[str]) -> Any:
    node = document
    for token in tokens[:-1]:
        node = _child(node, token)
    return node


def _get(document: Any, tokens: list[str]) -> Any:
    node = document
    for token in tokens:
        node = _child(node, token)
    return node


def _add(document: Any, tokens: list[str], value: Any) -> Any:
    if not tokens:
        return value
    parent, key = _parent(document, tokens), tokens[-1]
    if isinstance(parent, dict):
        parent[key] = value
    elif isinstance(parent, list):
        parent.insert(_index(key, len(parent), True), value)
    else:
        raise JSONPatchError(f"cannot add {key!r} to a scalar")
    return document


def _remove(document: Any, tokens: list[str]) -> tuple[Any, Any]:
    if not tokens:
        raise JSONPatchError("cannot remove the document root")
    parent, key = _parent(document, tokens), tokens[-1]
    if isinstance(parent, dict):
        if key not in parent:
            raise JSONPatchError(f"missing key: {key!r}")
        return document, parent.pop(key)
    if isinstance(parent, list):
        return document, parent.pop(_index(key, len(parent), False))
    raise JSONPatchError(f"cannot remove {key!r} from a scalar")


def _same(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(_same(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_same(x, y) for x, y in zip(a, b))
    if isinstance(a, (dict, list)) or isinstance(b, (dict, list)):
        return False
    return type(a) is type(b) and a == b or (
        isinstance(a, (int, float)) and isinstance(b, (int, float)) and a == b
    )


def _apply_one(document: Any, operation: dict[str, Any]) -> Any:
    op = operation["op"]
    tokens = _parse_pointer(operation["path"])
    if op == "add":
        return _add(document, tokens, copy.deepcopy(operation["value"]))
    if op == "remove":
        return _remove(document, tokens)[0]
    if op == "replace":
        _get(document, tokens)
        if not tokens:
            return copy.deepcopy(operation["value"])
        document, _ = _remove(document, tokens)
        return _add(document, tokens, copy.deepcopy(operation["value"]))
    source = _parse_pointer(operation["from"]) if op in ("move", "copy") else []
    if op == "move":
        if tokens[: len(source)] == source and len(tokens) > len(source):
            raise JSONPatchError("cannot move a value into one of its children")
        if not source:
            return _add(None, tokens, document) if tokens else document
        document, value = _remove(document, source)
        return _add(document, tokens, value)
    if op == "copy":
        return _add(document, tokens, copy.deepcopy(_get(document, source)))
    if not _same(_get(document, tokens), operation["value"]):
        raise JSONPatchError(f"test failed at {operation['path']!r}")
    return document