"""Deep copy and deep merge of nested structures."""

from __future__ import annotations

from typing import Any

from .nodes import NodeKind, kind_of


def copy(target: Any) -> Any:
    """Return a deep copy of ``target``.

    Mappings become plain dicts and sequences become lists; scalars are
    returned as they are.
    """
    match kind_of(target):
        case NodeKind.MAPPING:
            return {key: copy(value) for key, value in target.items()}
        case NodeKind.SEQUENCE:
            return [copy(item) for item in target]
        case NodeKind.SCALAR:
            return target


def merge(target: Any, source: Any, *sources: Any) -> Any:
    """Deep merge one or more sources onto a copy of ``target``.

    Only mappings are merged recursively. Any other value in a source,
    including a sequence, replaces what the result held at that key. Sources
    that are None are skipped.
    """
    result = copy(target)
    for overlay in (source, *sources):
        if overlay is not None:
            result = _merge_nodes(result, overlay)
    return result


def _merge_nodes(base: Any, overlay: Any) -> Any:
    # base is always owned by the merge result, overlay never is.
    if kind_of(base) is NodeKind.MAPPING and kind_of(overlay) is NodeKind.MAPPING:
        for key, value in overlay.items():
            base[key] = _merge_nodes(base[key], value) if key in base else copy(value)
        return base
    return copy(overlay)
