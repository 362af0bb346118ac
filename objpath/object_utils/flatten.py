"""Conversion between nested structures and single-level path maps."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .access import assign_path
from .copying import copy
from .nodes import entries, is_container, resolve_path


ShouldFlatten = Callable[[Any, Any], bool]


def _descends(key: Any, value: Any, should_flatten: ShouldFlatten | None) -> bool:
    if not is_container(value) or not value:
        return False
    return should_flatten is None or should_flatten(key, value)


def _flatten_into(
    result: dict[str, Any],
    node: Any,
    delimiter: str,
    parent: str | None,
    should_flatten: ShouldFlatten | None,
) -> None:
    for key, value in entries(node):
        name = str(key) if parent is None else f"{parent}{delimiter}{key}"
        if _descends(key, value, should_flatten):
            _flatten_into(result, value, delimiter, name, should_flatten)
        else:
            result[name] = copy(value)


def flat(
    target: Any,
    delimiter: str = ".",
    prefix: str = "",
    should_flatten: ShouldFlatten | None = None,
) -> dict[str, Any]:
    """Flatten a nested structure into a ``{path: value}`` dict.

    Sequence items use their index as path segment. Empty containers are kept
    as values, and so is any container for which ``should_flatten(key, value)``
    returns False.
    """
    result: dict[str, Any] = {}
    _flatten_into(result, target, delimiter, prefix or None, should_flatten)
    return result


def unflat(source: Mapping[str, Any], delimiter: str = ".", strict: bool = False) -> dict[str, Any]:
    """Rebuild a nested structure from a ``{path: value}`` dict.

    Entries are applied in order; index segments create lists. Entries blocked
    by a value written earlier are skipped, or raise ``PathConflictError``
    when ``strict`` is set.
    """
    result: dict[str, Any] = {}
    for path, value in source.items():
        _ = assign_path(result, resolve_path(path, delimiter), copy(value), delimiter, strict=strict)
    return result
