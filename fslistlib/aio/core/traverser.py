"""Async directory listing engine.

Walks a directory tree depth-first, one directory and one entry at a time,
and appends every selected entry to a single shared FileSet. Parents are
always listed before their children and siblings keep the order in which
the directory reader returned them.
"""

import os
from typing import List, Optional, Union

from ..._common import ListingConfig, ResultShape, TypeFilter
from .adapter import AsyncDirectoryReader, AsyncFileOperations
from .entry import Entry
from .fileset import FileSet


class AsyncListingTraverser:
    """Depth-first pre-order lister.

    Example:
        traverser = AsyncListingTraverser()
        config = ListingConfig.from_options(match="jpeg", recurse=True)
        photos = await traverser.traverse("pictures", config)
    """

    def __init__(
        self,
        reader: Optional[AsyncDirectoryReader] = None,
        operations: Optional[AsyncFileOperations] = None,
    ):
        """Initialize traverser.

        Args:
            reader: Directory reader (defaults to AsyncFileSystemReader)
            operations: File primitives handed to the resulting FileSet
        """
        if reader is None:
            from ..adapters.filesystem import AsyncFileSystemReader
            reader = AsyncFileSystemReader()
        self.reader = reader
        self.operations = operations

    async def traverse(
        self,
        root: Union[str, os.PathLike],
        config: Optional[ListingConfig] = None,
    ) -> FileSet:
        """List ``root`` according to ``config``.

        Args:
            root: Directory to list; relative paths are made absolute once here
            config: Resolved options (defaults to everything, no recursion)

        Returns:
            FileSet of Entry objects or full path strings

        Raises:
            FilesystemError: If any directory cannot be read
            PredicateError: If a match or recurse predicate raises
        """
        config = config or ListingConfig()
        results = FileSet(operations=self.operations)
        root_path = os.path.abspath(os.fspath(root))
        await self._list_dir(root_path, config, results, config.skip_top_level_files)
        return results

    async def _list_dir(
        self,
        directory: str,
        config: ListingConfig,
        results: FileSet,
        skip_files: bool,
    ) -> None:
        """List one directory, then descend into its subdirectories."""
        subdirs: List[Entry] = []

        for raw in await self.reader.read_dir(directory):
            entry = Entry.from_parent(directory, raw.name, raw.kind)
            # filters never prevent descent, only the recurse policy does
            if entry.is_dir:
                subdirs.append(entry)

            if not await self._selects(entry, config, skip_files):
                continue

            if config.result_type is ResultShape.ENTRY:
                results.append(entry)
            else:
                results.append(entry.full_path)

        if not config.recursive:
            return

        for subdir in subdirs:
            if await config.recurse.should_descend(subdir):
                # skip_top_level_files only ever applies at the root
                await self._list_dir(subdir.full_path, config, results, False)

    async def _selects(self, entry: Entry, config: ListingConfig, skip_files: bool) -> bool:
        """Apply the filters in order, stopping at the first that fails."""
        if skip_files and entry.is_file:
            return False

        if config.types is TypeFilter.FILES and not entry.is_file:
            return False
        if config.types is TypeFilter.DIRECTORIES and not entry.is_dir:
            return False

        if config.matcher is not None:
            return await config.matcher.matches(entry)
        return True
