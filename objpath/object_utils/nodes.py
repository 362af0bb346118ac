"""Path parsing and node classification shared by every path operation."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Final


if TYPE_CHECKING:
    from collections.abc import Iterator


class NodeKind(Enum):
    """Kinds of node found while walking a structure."""

    SCALAR = auto()
    MAPPING = auto()
    SEQUENCE = auto()


class _Missing:
    """Marker for a child that does not exist."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()

# Largest number of None items a write may pad a sequence with.
MAX_INDEX_GAP: Final = 10_000


def kind_of(value: Any) -> NodeKind:
    """Classify a value as a mapping, a sequence or a scalar."""
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def is_container(value: Any) -> bool:
    """Return True for mappings and sequences."""
    return kind_of(value) is not NodeKind.SCALAR


def type_name(value: Any) -> str:
    """Name the type of a value for error messages."""
    return type(value).__name__


def resolve_path(path: str, delimiter: str = ".") -> list[str]:
    """Split a path into its segments.

    Empty segments produced by leading, trailing or doubled delimiters are kept
    as literal ``""`` keys.
    """
    return path.split(delimiter)


def is_index(segment: str) -> bool:
    """Return True when a segment addresses a sequence position."""
    return segment.isascii() and segment.isdigit()


def entries(node: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs for a container and nothing for a scalar."""
    match kind_of(node):
        case NodeKind.MAPPING:
            yield from node.items()
        case NodeKind.SEQUENCE:
            yield from enumerate(node)
        case NodeKind.SCALAR:
            return


def can_hold(node: Any, segment: str) -> bool:
    """Return True when ``segment`` can be written into ``node``."""
    match kind_of(node):
        case NodeKind.MAPPING:
            return True
        case NodeKind.SEQUENCE:
            return is_index(segment) and int(segment) <= len(node) + MAX_INDEX_GAP
        case NodeKind.SCALAR:
            return False


def child(node: Any, segment: str) -> Any:
    """Return the child addressed by ``segment`` or ``MISSING``."""
    match kind_of(node):
        case NodeKind.MAPPING:
            return node[segment] if segment in node else MISSING
        case NodeKind.SEQUENCE:
            if is_index(segment) and int(segment) < len(node):
                return node[int(segment)]
            return MISSING
        case NodeKind.SCALAR:
            return MISSING


def put_child(node: dict[str, Any] | list[Any], segment: str, value: Any) -> None:
    """Store ``value`` under ``segment``, padding sequences with None when needed."""
    if isinstance(node, list):
        index = int(segment)
        if index < len(node):
            node[index] = value
            return
        node.extend([None] * (index - len(node)))
        node.append(value)
        return
    node[segment] = value


def remove_child(node: dict[str, Any] | list[Any], segment: str) -> None:
    """Remove the child addressed by ``segment``; later sequence items shift down."""
    if isinstance(node, list):
        del node[int(segment)]
        return
    del node[segment]
