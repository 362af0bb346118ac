"""Endpoint dictionaries: flattening and URL generation."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import httpx

from objpath.object_utils import flat


Endpoint = str | Mapping[str, Any]


def _is_endpoint_group(_key: Any, value: Any) -> bool:
    # A mapping with a path is an endpoint definition, anything else groups endpoints.
    return isinstance(value, Mapping) and "path" not in value


def flatten_endpoints(endpoints: Mapping[str, Any]) -> dict[str, Endpoint]:
    """Flatten nested endpoint groups into ``{"group.name": endpoint}``."""
    return flat(endpoints, ".", "", _is_endpoint_group)


def build_endpoint_url(base_url: str, endpoint: Endpoint, parameters: Mapping[str, Any] | None = None) -> str:
    """Generate the URL for an endpoint definition.

    ``endpoint`` is a path template such as ``"users/:id"``, or a mapping with
    ``path`` and optional ``query`` defaults (None defaults are left out).
    Parameters fill ``:name`` placeholders and the rest go to the query string.
    """
    definition: Mapping[str, Any] = {"path": endpoint} if isinstance(endpoint, str) else endpoint
    remaining = dict(parameters or {})
    query: dict[str, Any] = {}
    for name, default in (definition.get("query") or {}).items():
        if name in remaining:
            query[name] = remaining.pop(name)
        elif default is not None:
            query[name] = default

    path: str = definition["path"]
    for name, value in remaining.items():
        # ":id" must not match the start of ":identity".
        placeholder = re.compile(rf":{re.escape(name)}(?!\w)")
        found = placeholder.search(path)
        if found:
            path = f"{path[: found.start()]}{value}{path[found.end() :]}"
        else:
            query[name] = value

    url = httpx.URL(f"{base_url.rstrip('/')}/{path.lstrip('/')}")
    if query:
        url = url.copy_merge_params(query)
    return str(url)
