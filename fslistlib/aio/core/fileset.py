"""Batch file set.

A FileSet is an ordered, mutable sequence of file references (path strings,
Entry objects or anything else exposing ``full_path``) with bulk copy, move
and delete operations. Listings return one; callers can also build their
own from a plain list of paths.
"""

import os
import sys
from collections.abc import MutableSequence
from typing import Any, Iterable, Iterator, Optional, TextIO, Union

from ...exceptions import FilesystemError
from ..cleanup_policies import create_cleanup_policy
from .adapter import AsyncFileOperations
from .entry import EntryKind


def get_file_path(item: Any) -> str:
    """Resolve one FileSet element to its full path.

    Args:
        item: A path string, an object with ``full_path`` or an os.PathLike

    Returns:
        The full path string

    Raises:
        TypeError: For any other element shape
    """
    if isinstance(item, str):
        return item
    full_path = getattr(item, 'full_path', None)
    if isinstance(full_path, str):
        return full_path
    if isinstance(item, os.PathLike):
        return os.fspath(item)
    raise TypeError(
        f"Expecting path strings or objects with a .full_path attribute, "
        f"got {type(item).__name__}"
    )


def _is_directory(item: Any) -> bool:
    kind = getattr(item, 'kind', None)
    return kind is EntryKind.DIRECTORY or kind == EntryKind.DIRECTORY.value


class FileSet(MutableSequence):
    """Ordered collection of files with bulk operations.

    Operations process one file at a time, strictly in order. Directory
    entries are skipped by ``copy`` and ``move``; ``cleanup`` hands every
    element to the delete primitive, which refuses directories.

    Example:
        files = await list_files("inbox", types="files")
        archived = await files.copy("archive")
        await files.cleanup()
    """

    def __init__(
        self,
        items: Iterable[Any] = (),
        operations: Optional[AsyncFileOperations] = None,
    ):
        """Initialize file set.

        Args:
            items: Initial elements
            operations: File primitives (defaults to AsyncFileSystemOperations)
        """
        self._items = list(items)
        self._operations = operations

    @property
    def operations(self) -> AsyncFileOperations:
        """File primitives used by copy, move and cleanup."""
        if self._operations is None:
            from ..adapters.filesystem import AsyncFileSystemOperations
            self._operations = AsyncFileSystemOperations()
        return self._operations

    def _derive(self, items: Iterable[Any] = ()) -> "FileSet":
        return FileSet(items, operations=self._operations)

    # Sequence protocol

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._derive(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value):
        self._items[index] = value

    def __delitem__(self, index):
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, value)

    def __eq__(self, other) -> bool:
        if isinstance(other, FileSet):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"FileSet({self._items!r})"

    # Iteration helpers

    def full_paths(self, files_only: bool = False) -> Iterator[str]:
        """Iterate the full path of every element.

        Args:
            files_only: Skip elements tagged as directories. Plain path
                strings carry no kind and are never skipped.

        Yields:
            Full path strings, in order

        Raises:
            TypeError: When an element cannot be resolved to a path
        """
        for item in self._items:
            if files_only and _is_directory(item):
                continue
            yield get_file_path(item)

    def log(self, file: Optional[TextIO] = None) -> None:
        """Print every element, one per line."""
        out = file or sys.stdout
        for item in self._items:
            print(item, file=out)

    # Bulk operations

    async def copy(
        self,
        dest_dir: Union[str, os.PathLike],
        delete_copies_upon_fail: bool = True,
        overwrite: bool = True,
    ) -> "FileSet":
        """Copy every file into ``dest_dir``.

        ``dest_dir`` is created if needed. Each copy keeps the source's base
        name, so two sources with the same name end up as one file (the
        last copy wins).

        Args:
            dest_dir: Target directory
            delete_copies_upon_fail: On failure, delete the copies made so far
                before re-raising
            overwrite: If False, an existing destination file is a failure

        Returns:
            FileSet of the destination paths created

        Raises:
            FilesystemError: The first copy failure (after rollback)
        """
        dest_dir = os.fspath(dest_dir)
        ops = self.operations
        copied = self._derive()
        await ops.ensure_dir(dest_dir)
        try:
            for full_path in self.full_paths(files_only=True):
                dest_file = os.path.join(dest_dir, os.path.basename(full_path))
                await ops.copy_file(full_path, dest_file, overwrite=overwrite)
                copied.append(dest_file)
        except Exception as e:
            if delete_copies_upon_fail:
                # raises e once every copy has been attempted
                await copied.cleanup(stop_on_error=False, outcome=e)
            raise
        return copied

    async def move(self, dest_dir: Union[str, os.PathLike]) -> "FileSet":
        """Move every file into ``dest_dir``.

        Stops at the first failure; files already moved stay moved and
        nothing is rolled back.

        Args:
            dest_dir: Target directory, created if needed

        Returns:
            FileSet of the destination paths

        Raises:
            FilesystemError: The first rename failure
        """
        dest_dir = os.fspath(dest_dir)
        ops = self.operations
        moved = self._derive()
        await ops.ensure_dir(dest_dir)
        for full_path in self.full_paths(files_only=True):
            dest_file = os.path.join(dest_dir, os.path.basename(full_path))
            await ops.rename_file(full_path, dest_file)
            moved.append(dest_file)
        return moved

    async def cleanup(
        self,
        stop_on_error: bool = True,
        outcome: Union[str, BaseException] = "natural",
        verbose: bool = False,
    ) -> None:
        """Delete every element from the filesystem.

        The in-memory sequence is left as it is.

        Args:
            stop_on_error: End at the first failed delete. When False, every
                element is attempted and the first error is remembered.
            outcome: "natural" fails with the first delete error, "resolve"
                always succeeds, an exception instance is always raised at
                the end
            verbose: Print a warning for each failure that does not stop
                the cleanup

        Raises:
            FilesystemError: First delete failure with outcome "natural"
            ConfigurationError: For an unknown outcome value
        """
        policy = create_cleanup_policy(outcome, stop_on_error=stop_on_error, verbose=verbose)
        ops = self.operations
        for full_path in self.full_paths():
            failure = None
            try:
                await ops.delete_file(full_path)
            except FilesystemError as e:
                failure = e
            # handled outside the except block: a raised outcome error gets no delete failure as context
            if failure is not None and policy.handle(failure, full_path):
                return
        policy.finish()
