"""Async filesystem collaborators.

Implements the directory reader and the file primitives on top of the os
and shutil modules. Every blocking call runs in a worker thread through
asyncio.to_thread so the event loop stays free, and every OSError is
translated into FilesystemError.
"""

import asyncio
import os
import shutil
from typing import List, Set

from ...exceptions import FilesystemError
from ..core import AsyncDirectoryReader, AsyncFileOperations, EntryKind, RawEntry


class AsyncFileSystemReader(AsyncDirectoryReader):
    """Directory reader using os.scandir.

    Entry kinds come from the cached DirEntry type information, so no extra
    stat call is made per entry.
    """

    def __init__(self, follow_symlinks: bool = False):
        """Initialize filesystem reader.

        Args:
            follow_symlinks: Report a link as the kind of its target. When
                False (the default) links are reported as UNKNOWN.
        """
        super().__init__()
        self.follow_symlinks = follow_symlinks

    async def read_dir(self, path: str) -> List[RawEntry]:
        """Read all entries of ``path`` in one shot.

        Args:
            path: Directory to read

        Returns:
            RawEntry list in directory order

        Raises:
            FilesystemError: Not found, not a directory, permission denied, ...
        """
        def _scan_directory_sync(directory: str) -> List[RawEntry]:
            """Synchronous scan run in a worker thread."""
            entries = []
            with os.scandir(directory) as iterator:
                for entry in iterator:
                    entries.append(RawEntry(entry.name, self._kind_of(entry)))
            return entries

        self.reads += 1
        try:
            return await asyncio.to_thread(_scan_directory_sync, path)
        except OSError as e:
            raise FilesystemError.from_os_error(e, 'read_dir') from e

    def _kind_of(self, entry: os.DirEntry) -> EntryKind:
        try:
            if entry.is_file(follow_symlinks=self.follow_symlinks):
                return EntryKind.FILE
            if entry.is_dir(follow_symlinks=self.follow_symlinks):
                return EntryKind.DIRECTORY
        except OSError:
            # broken links and vanished entries cannot be classified
            pass
        return EntryKind.UNKNOWN

    def _define_capabilities(self) -> Set[str]:
        """Define filesystem reader capabilities."""
        return super()._define_capabilities() | {'symlinks'}

    async def get_stats(self) -> dict:
        """Get reader statistics."""
        stats = await super().get_stats()
        stats['follow_symlinks'] = self.follow_symlinks
        return stats


class AsyncFileSystemOperations(AsyncFileOperations):
    """File primitives on the local filesystem."""

    def __init__(self):
        self.counts = {'ensure_dir': 0, 'copy_file': 0, 'rename_file': 0, 'delete_file': 0}

    async def _run(self, operation: str, func, *args):
        self.counts[operation] += 1
        try:
            return await asyncio.to_thread(func, *args)
        except OSError as e:
            raise FilesystemError.from_os_error(e, operation) from e

    async def ensure_dir(self, path: str) -> None:
        await self._run('ensure_dir', _make_dirs, path)

    async def copy_file(self, src: str, dst: str, overwrite: bool = True) -> None:
        await self._run('copy_file', _copy_file, src, dst, overwrite)

    async def rename_file(self, src: str, dst: str) -> None:
        await self._run('rename_file', os.rename, src, dst)

    async def delete_file(self, path: str) -> None:
        await self._run('delete_file', os.unlink, path)

    async def get_stats(self) -> dict:
        """Get per-primitive call counts."""
        return dict(self.counts)


def _make_dirs(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def _copy_file(src: str, dst: str, overwrite: bool) -> None:
    # exclusive create when not overwriting, like copyFile with COPYFILE_EXCL
    with open(src, 'rb') as fsrc:
        if overwrite and os.path.exists(dst) and os.path.samefile(src, dst):
            raise shutil.SameFileError(f"{src!r} and {dst!r} are the same file")
        fdst = open(dst, 'wb' if overwrite else 'xb')
        try:
            with fdst:
                shutil.copyfileobj(fsrc, fdst)
        except OSError:
            # dst was created or truncated by this call, never leave it half written
            _discard(dst)
            raise


def _discard(path: str) -> None:
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
