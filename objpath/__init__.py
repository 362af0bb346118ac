"""objpath - read, write and reshape nested dicts and lists through delimited paths"""

from ._version import version as __version__
from .api_client import APIClient, APIClientError
from .deep_assign import (
    ArrayMode,
    DeepAssign,
    deep_assign,
    deep_assign_with_concat,
    deep_assign_with_overwrite,
    deep_assign_with_shallow_merge,
)
from .errors import PathConflictError, PathError, PathNotFoundError
from .object_utils import (
    copy,
    dash_to_lower_camel_keys,
    dash_to_snake_keys,
    delete_path,
    extract,
    flat,
    format_keys,
    get_path,
    lower_camel_to_dash_keys,
    lower_camel_to_snake_keys,
    merge,
    set_path,
    snake_to_dash_keys,
    snake_to_lower_camel_keys,
    unflat,
)


__all__ = [
    "APIClient",
    "APIClientError",
    "ArrayMode",
    "DeepAssign",
    "PathConflictError",
    "PathError",
    "PathNotFoundError",
    "__version__",
    "copy",
    "dash_to_lower_camel_keys",
    "dash_to_snake_keys",
    "deep_assign",
    "deep_assign_with_concat",
    "deep_assign_with_overwrite",
    "deep_assign_with_shallow_merge",
    "delete_path",
    "extract",
    "flat",
    "format_keys",
    "get_path",
    "lower_camel_to_dash_keys",
    "lower_camel_to_snake_keys",
    "merge",
    "set_path",
    "snake_to_dash_keys",
    "snake_to_lower_camel_keys",
    "unflat",
]
