"""Rewrite mapping keys across a nested structure."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Any

from .nodes import NodeKind, kind_of


KeyTransform = Callable[[re.Match[str]], str]

_LOWER_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z\d])([A-Z])")
_SNAKE_BOUNDARY = re.compile(r"(?<=[^\W_])_([^\W_])")
_DASH_BOUNDARY = re.compile(r"(?<=[^\W_])-([^\W_])")


def _normalize_paths(paths: Iterable[str] | None, delimiter: str) -> list[str]:
    # Entries like ".name.first." are incomplete paths; only the inner part matters.
    return [path.strip(delimiter) for path in paths or ()]


def _matches_any(path: str, entries: list[str], delimiter: str) -> bool:
    candidate = f"{path}{delimiter}"
    return any(candidate.startswith(f"{entry}{delimiter}") for entry in entries)


def format_keys(
    target: Any,
    pattern: str | re.Pattern[str],
    transform: KeyTransform,
    include: Iterable[str] | None = None,
    exclude: Iterable[str] | None = None,
    delimiter: str = ".",
) -> Any:
    """Return a copy of ``target`` with its mapping keys rewritten.

    Every key is passed through ``re.sub(pattern, transform, key)``. When
    ``include`` is given, only keys whose path equals or descends from one of
    its entries are rewritten; keys matching ``exclude`` the same way are left
    alone. Paths use the original keys and list indexes, joined with
    ``delimiter``. List items are walked, but never renamed.

    Example::

        format_keys({"firstName": "R"}, r"^\\w", lambda match: match[0].upper())
        # {"FirstName": "R"}
    """
    compiled = re.compile(pattern)
    include_paths = _normalize_paths(include, delimiter)
    exclude_paths = _normalize_paths(exclude, delimiter)

    def should_format(path: str) -> bool:
        if include_paths and not _matches_any(path, include_paths, delimiter):
            return False
        return not _matches_any(path, exclude_paths, delimiter)

    def rebuild(node: Any, parent: str | None) -> Any:
        match kind_of(node):
            case NodeKind.MAPPING:
                formatted: dict[Any, Any] = {}
                for key, value in node.items():
                    path = str(key) if parent is None else f"{parent}{delimiter}{key}"
                    new_key = compiled.sub(transform, key) if isinstance(key, str) and should_format(path) else key
                    formatted[new_key] = rebuild(value, path)
                return formatted
            case NodeKind.SEQUENCE:
                return [
                    rebuild(item, str(index) if parent is None else f"{parent}{delimiter}{index}")
                    for index, item in enumerate(node)
                ]
            case NodeKind.SCALAR:
                return node

    return rebuild(target, None)


def lower_camel_to_snake_keys(
    target: Any,
    include: Iterable[str] | None = None,
    exclude: Iterable[str] | None = None,
    delimiter: str = ".",
) -> Any:
    """Rename ``lowerCamelCase`` keys to ``snake_case``."""
    return format_keys(target, _LOWER_CAMEL_BOUNDARY, lambda match: f"_{match[1].lower()}", include, exclude, delimiter)


def lower_camel_to_dash_keys(
    target: Any,
    include: Iterable[str] | None = None,
    exclude: Iterable[str] | None = None,
    delimiter: str = ".",
) -> Any:
    """Rename ``lowerCamelCase`` keys to ``dash-case``."""
    return format_keys(target, _LOWER_CAMEL_BOUNDARY, lambda match: f"-{match[1].lower()}", include, exclude, delimiter)


def snake_to_lower_camel_keys(
    target: Any,
    include: Iterable[str] | None = None,
    exclude: Iterable[str] | None = None,
    delimiter: str = ".",
) -> Any:
    """Rename ``snake_case`` keys to ``lowerCamelCase``."""
    return format_keys(target, _SNAKE_BOUNDARY, lambda match: match[1].upper(), include, exclude, delimiter)


def snake_to_dash_keys(
    target: Any,
    include: Iterable[str] | None = None,
    exclude: Iterable[str] | None = None,
    delimiter: str = ".",
) -> Any:
    """Rename ``snake_case`` keys to ``dash-case``."""
    return format_keys(target, _SNAKE_BOUNDARY, lambda match: f"-{match[1]}", include, exclude, delimiter)


def dash_to_lower_camel_keys(
    target: Any,
    include: Iterable[str] | None = None,
    exclude: Iterable[str] | None = None,
    delimiter: str = ".",
) -> Any:
    """Rename ``dash-case`` keys to ``lowerCamelCase``."""
    return format_keys(target, _DASH_BOUNDARY, lambda match: match[1].upper(), include, exclude, delimiter)


def dash_to_snake_keys(
    target: Any,
    include: Iterable[str] | None = None,
    exclude: Iterable[str] | None = None,
    delimiter: str = ".",
) -> Any:
    """Rename ``dash-case`` keys to ``snake_case``."""
    return format_keys(target, _DASH_BOUNDARY, lambda match: f"_{match[1]}", include, exclude, delimiter)
