"""Read, write and delete values inside nested structures using delimited paths."""

from __future__ import annotations

import logging
from typing import Any

from objpath.errors import PathConflictError, PathNotFoundError

from .copying import copy
from .nodes import MISSING, can_hold, child, is_container, is_index, put_child, remove_child, resolve_path, type_name


logger = logging.getLogger(__name__)


def find_path(target: Any, segments: list[str], delimiter: str, *, strict: bool) -> Any:
    """Walk ``segments`` from ``target`` and return the value found or ``MISSING``."""
    current = target
    for position, segment in enumerate(segments):
        current = child(current, segment)
        if current is MISSING:
            if strict:
                raise PathNotFoundError(delimiter.join(segments[: position + 1]))
            return MISSING
    return current


def _find_block(root: Any, segments: list[str]) -> tuple[int, Any] | None:
    # Containers that a write would create are stood in for by empty ones.
    current = root
    last = len(segments) - 1
    for position, segment in enumerate(segments):
        if not can_hold(current, segment):
            return position, current
        if position < last:
            found = child(current, segment)
            current = ([] if is_index(segments[position + 1]) else {}) if found is MISSING else found
    return None


def assign_path(root: Any, segments: list[str], value: Any, delimiter: str, *, strict: bool) -> bool:
    """Store ``value`` at ``segments`` inside ``root``, which is modified in place.

    Missing containers are created along the way: a list when the following
    segment is an index, a dict otherwise. Returns False, leaving ``root``
    untouched, when the path is blocked and ``strict`` is not set. Lists only
    take index segments, and only up to ``MAX_INDEX_GAP`` past their end.
    """
    block = _find_block(root, segments)
    if block is not None:
        position, node = block
        blocked = delimiter.join(segments[:position])
        if strict:
            raise PathConflictError(blocked, type_name(node))
        logger.debug("Path %r is blocked by a %s on %r", delimiter.join(segments), type_name(node), blocked)
        return False

    current = root
    for position, segment in enumerate(segments[:-1]):
        found = child(current, segment)
        if found is MISSING:
            found = [] if is_index(segments[position + 1]) else {}
            put_child(current, segment, found)
        current = found
    put_child(current, segments[-1], value)
    return True


def get_path(target: Any, path: str, delimiter: str = ".", strict: bool = False, *, default: Any = None) -> Any:
    """Return the value stored at ``path``, without copying it.

    Unresolved paths give ``default``, or raise ``PathNotFoundError`` when
    ``strict`` is set.
    """
    value = find_path(target, resolve_path(path, delimiter), delimiter, strict=strict)
    return default if value is MISSING else value


def set_path(target: Any, path: str, value: Any, delimiter: str = ".", strict: bool = False) -> Any:
    """Return a copy of ``target`` with ``value`` stored at ``path``.

    Returns None when an existing non-container value blocks the path, or
    raises ``PathConflictError`` when ``strict`` is set.
    """
    result = copy(target)
    if not assign_path(result, resolve_path(path, delimiter), copy(value), delimiter, strict=strict):
        return None
    return result


def delete_path(
    target: Any,
    path: str,
    delimiter: str = ".",
    clean_empty: bool = True,
    strict: bool = False,
) -> Any:
    """Return a copy of ``target`` without the value stored at ``path``.

    When ``clean_empty`` is set, containers left empty by the removal are
    removed as well, up to the root. A missing path leaves the copy untouched,
    or raises ``PathNotFoundError`` when ``strict`` is set.
    """
    result = copy(target)
    segments = resolve_path(path, delimiter)
    trail: list[tuple[Any, str]] = []
    current = result
    for position, segment in enumerate(segments):
        found = child(current, segment)
        if found is MISSING:
            if strict:
                raise PathNotFoundError(delimiter.join(segments[: position + 1]))
            return result
        trail.append((current, segment))
        current = found

    parent, segment = trail.pop()
    remove_child(parent, segment)
    if clean_empty:
        while trail and is_container(parent) and not parent:
            parent, segment = trail.pop()
            remove_child(parent, segment)
    return result
