"""Errors raised by strict path operations."""

from __future__ import annotations


class PathError(Exception):
    """Base error for a path that could not be walked."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class PathNotFoundError(PathError, LookupError):
    """Raised in strict mode when a path segment cannot be resolved."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"There's nothing on '{path}'")


class PathConflictError(PathError, ValueError):
    """Raised in strict mode when an existing value blocks a path."""

    def __init__(self, path: str, kind: str) -> None:
        super().__init__(path, f"There's already an element of type '{kind}' on '{path}'")
        self.kind = kind
