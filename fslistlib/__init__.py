"""fslistlib - Async directory listing and batch file operations.

fslistlib lists a directory tree with configurable matching, type filtering
and recursion, and hands the result back as a FileSet that can be copied,
moved or deleted in bulk with well-defined behaviour on partial failure.

    from fslistlib.aio import list_files

    files = await list_files("inbox", match="pdf", types="files", recurse=True)
    await files.copy("archive")
"""

__version__ = "0.1.0"

from . import aio
from .exceptions import (
    FsListError,
    ConfigurationError,
    FilesystemError,
    PredicateError,
)

__all__ = [
    "__version__",
    "aio",
    "FsListError",
    "ConfigurationError",
    "FilesystemError",
    "PredicateError",
]
