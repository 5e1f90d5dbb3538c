"""Async collaborator abstractions.

Defines the two interfaces the listing engine and the file set are written
against: a directory reader and a set of file primitives. The real
filesystem versions live in ``fslistlib.aio.adapters``; tests substitute
their own.
"""

from abc import ABC, abstractmethod
from typing import List, NamedTuple, Set

from .entry import EntryKind


class RawEntry(NamedTuple):
    """Name and kind of one item as returned by a directory read."""
    name: str
    kind: EntryKind


class AsyncDirectoryReader(ABC):
    """Abstract base class for async directory readers.

    A reader returns every entry of one directory, with its kind, in a
    single call. The listing engine never asks for anything else.
    """

    def __init__(self):
        """Initialize reader statistics."""
        self.reads = 0
        self._capabilities = self._define_capabilities()

    @abstractmethod
    async def read_dir(self, path: str) -> List[RawEntry]:
        """Read all entries of a directory.

        Args:
            path: Absolute directory path

        Returns:
            Entries in the order the directory yields them

        Raises:
            FilesystemError: If the directory cannot be read
        """
        pass

    def supports_capability(self, capability: str) -> bool:
        """Check if reader supports a specific capability.

        Args:
            capability: Capability name

        Returns:
            True if capability is supported
        """
        return capability in self._capabilities

    def _define_capabilities(self) -> Set[str]:
        """Define reader capabilities.

        Override in subclasses to declare supported features.
        """
        return {'read_dir'}

    async def get_stats(self) -> dict:
        """Get reader statistics.

        Returns:
            Dictionary of statistics (I/O count, cache hits, etc.)
        """
        return {'reads': self.reads}

    async def close(self):
        """Clean up reader resources.

        Override if the reader needs cleanup (close connections, etc.)
        """
        pass

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()


class AsyncFileOperations(ABC):
    """Abstract base class for the file primitives used by FileSet.

    Every method fails with FilesystemError on I/O failure.
    """

    @abstractmethod
    async def ensure_dir(self, path: str) -> None:
        """Create ``path`` and any missing ancestors; existing is not an error."""
        pass

    @abstractmethod
    async def copy_file(self, src: str, dst: str, overwrite: bool = True) -> None:
        """Copy file contents from ``src`` to ``dst``.

        Args:
            src: Source file path
            dst: Destination file path
            overwrite: If False, fail when ``dst`` already exists
        """
        pass

    @abstractmethod
    async def rename_file(self, src: str, dst: str) -> None:
        """Rename (move) ``src`` to ``dst``."""
        pass

    @abstractmethod
    async def delete_file(self, path: str) -> None:
        """Delete a single file. Directories are not removed."""
        pass

    async def get_stats(self) -> dict:
        """Get operation statistics. Subclasses add their own counters."""
        return {}
