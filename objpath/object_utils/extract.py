"""Build new structures out of selected paths of an existing one."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .access import assign_path, find_path
from .copying import copy
from .nodes import MISSING, resolve_path


Selector = str | Mapping[str, str]
Selectors = str | Mapping[str, str] | Iterable[Selector]


def _selector_pairs(selectors: Selectors) -> Iterator[tuple[str, str]]:
    """Normalize selectors into ``(destination, source)`` path pairs."""
    if isinstance(selectors, str):
        yield selectors, selectors
        return
    if isinstance(selectors, Mapping):
        yield from selectors.items()
        return
    for selector in selectors:
        if isinstance(selector, Mapping):
            yield from selector.items()
        else:
            yield selector, selector


def extract(target: Any, selectors: Selectors, delimiter: str = ".", strict: bool = False) -> Any:
    """Copy selected paths of ``target`` into a new dict.

    ``selectors`` can be a path, a list of paths, or destination-to-source
    mappings (either one mapping or single-entry mappings inside the list), e.g.
    ``["age", {"name": "name.first"}]`` reads ``name.first`` and stores it on
    ``name``.

    Sources that don't resolve are skipped, unless ``strict`` is set. When an
    earlier extracted value blocks a destination path, the whole extraction
    returns None (or raises ``PathConflictError`` when ``strict`` is set).
    """
    result: dict[str, Any] = {}
    for destination, source in _selector_pairs(selectors):
        value = find_path(target, resolve_path(source, delimiter), delimiter, strict=strict)
        if value is MISSING:
            continue
        if not assign_path(result, resolve_path(destination, delimiter), copy(value), delimiter, strict=strict):
            return None
    return result
