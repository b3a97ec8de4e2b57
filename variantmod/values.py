"""Merging of nested template values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["merge_by_overwrite"]


def merge_by_overwrite(*args: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge mappings left to right into a new dict.

    Later scalar values overwrite earlier ones. When both sides hold a mapping
    the two are merged recursively. When the new value is a mapping but the
    existing one is not, the existing value is kept.
    """
    result: dict[str, Any] = {}
    for source in args:
        if not source:
            continue
        for key, value in source.items():
            if isinstance(value, Mapping) and key in result:
                existing = result[key]
                if isinstance(existing, Mapping):
                    result[key] = merge_by_overwrite(existing, value)
            else:
                result[key] = value
    return result