"""Path-addressable access, mutation and reshaping of nested structures."""

from .access import delete_path, get_path, set_path
from .copying import copy, merge
from .extract import extract
from .flatten import flat, unflat
from .keys import (
    dash_to_lower_camel_keys,
    dash_to_snake_keys,
    format_keys,
    lower_camel_to_dash_keys,
    lower_camel_to_snake_keys,
    snake_to_dash_keys,
    snake_to_lower_camel_keys,
)
from .nodes import MAX_INDEX_GAP, NodeKind, is_index, kind_of, resolve_path


__all__ = [
    "MAX_INDEX_GAP",
    "NodeKind",
    "copy",
    "dash_to_lower_camel_keys",
    "dash_to_snake_keys",
    "delete_path",
    "extract",
    "flat",
    "format_keys",
    "get_path",
    "is_index",
    "kind_of",
    "lower_camel_to_dash_keys",
    "lower_camel_to_snake_keys",
    "merge",
    "resolve_path",
    "set_path",
    "snake_to_dash_keys",
    "snake_to_lower_camel_keys",
    "unflat",
]
