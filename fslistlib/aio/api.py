"""High-level async API for fslistlib.

This module provides simple, user-friendly async functions for listing a
directory tree and acting on the resulting files.
"""

import os
from typing import Any, Iterable, Optional, Union

from .._common import ListingConfig, MatchField, ResultShape, TypeFilter
from .core import (
    AsyncDirectoryReader,
    AsyncFileOperations,
    AsyncListingTraverser,
    FileSet,
)

PathType = Union[str, os.PathLike]


async def list_files(
    root: PathType,
    match_field: Any = MatchField.EXTENSION,
    match: Any = None,
    case_insensitive: Optional[bool] = None,
    types: Any = TypeFilter.BOTH,
    result_type: Any = ResultShape.ENTRY,
    skip_top_level_files: bool = False,
    recurse: Any = False,
    reader: Optional[AsyncDirectoryReader] = None,
    operations: Optional[AsyncFileOperations] = None,
) -> FileSet:
    """List a directory, optionally recursively, with filtering.

    With no options this returns every file and directory directly under
    ``root`` as Entry objects.

    Args:
        root: Directory to list (relative paths are resolved)
        match_field: "ext", "base" or "file" - the name part ``match`` sees
        match: Exact string, compiled regex, or callable(entry) returning a
            bool or an awaitable bool
        case_insensitive: Only with a string ``match``; defaults to True there
        types: "files", "dirs" or "both"
        result_type: "object" for Entry objects, "fullPath" for path strings
        skip_top_level_files: Leave out files directly under ``root``
        recurse: False, True, or callable(entry) deciding per subdirectory
        reader: Directory reader (defaults to AsyncFileSystemReader)
        operations: File primitives for the returned FileSet

    Returns:
        FileSet in depth-first order, parents before children

    Raises:
        ConfigurationError: Invalid options, before any I/O
        FilesystemError: A directory could not be read
        PredicateError: A match or recurse callable raised

    Example:
        >>> files = await list_files("photos", match="jpg", recurse=True,
        ...                          types="files", result_type="fullPath")
    """
    config = ListingConfig.from_options(
        match_field=match_field,
        match=match,
        case_insensitive=case_insensitive,
        types=types,
        result_type=result_type,
        skip_top_level_files=skip_top_level_files,
        recurse=recurse,
    )
    traverser = AsyncListingTraverser(reader=reader, operations=operations)
    return await traverser.traverse(root, config)


def _as_fileset(files: Iterable[Any], operations: Optional[AsyncFileOperations]) -> FileSet:
    if isinstance(files, FileSet) and operations is None:
        return files
    return FileSet(files, operations=operations)


async def copy_files(
    files: Iterable[Any],
    dest_dir: PathType,
    delete_copies_upon_fail: bool = True,
    overwrite: bool = True,
    operations: Optional[AsyncFileOperations] = None,
) -> FileSet:
    """Copy files into ``dest_dir``. See FileSet.copy."""
    fileset = _as_fileset(files, operations)
    return await fileset.copy(
        dest_dir,
        delete_copies_upon_fail=delete_copies_upon_fail,
        overwrite=overwrite,
    )


async def move_files(
    files: Iterable[Any],
    dest_dir: PathType,
    operations: Optional[AsyncFileOperations] = None,
) -> FileSet:
    """Move files into ``dest_dir``. See FileSet.move."""
    return await _as_fileset(files, operations).move(dest_dir)


async def cleanup_files(
    files: Iterable[Any],
    stop_on_error: bool = True,
    outcome: Union[str, BaseException] = "natural",
    verbose: bool = False,
    operations: Optional[AsyncFileOperations] = None,
) -> None:
    """Delete files. See FileSet.cleanup."""
    await _as_fileset(files, operations).cleanup(
        stop_on_error=stop_on_error,
        outcome=outcome,
        verbose=verbose,
    )
