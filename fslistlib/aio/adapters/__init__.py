"""Async adapters for the local filesystem.

This module contains the concrete directory reader and file primitives
the listing engine and FileSet use by default.
"""

from .filesystem import (
    AsyncFileSystemReader,
    AsyncFileSystemOperations,
)

__all__ = [
    'AsyncFileSystemReader',
    'AsyncFileSystemOperations',
]
