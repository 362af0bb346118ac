"""Async JSON API client built on named, nested endpoint definitions."""

from .client import APIClient, APIClientError
from .endpoints import build_endpoint_url, flatten_endpoints


__all__ = ["APIClient", "APIClientError", "build_endpoint_url", "flatten_endpoints"]
