"""
Caching directory reader for fslistlib.

Provides a transparent caching layer that can wrap any directory reader,
useful when the same tree is listed repeatedly with different filters.
"""

import os
from typing import List, Optional, Set

from cachetools import TTLCache

from ..core import AsyncDirectoryReader, RawEntry


class CachingDirectoryReader(AsyncDirectoryReader):
    """
    Optional caching layer for any directory reader.

    Caches the entries of each directory read for ``ttl`` seconds. Errors
    are never cached, so a directory that failed is read again next time.

    Example:
        reader = CachingDirectoryReader(AsyncFileSystemReader(), ttl=30)
        images = await list_files(root, match="png", recurse=True, reader=reader)
        videos = await list_files(root, match="mp4", recurse=True, reader=reader)
    """

    def __init__(
        self,
        base_reader: AsyncDirectoryReader,
        max_size: int = 10000,
        ttl: float = 300.0  # 5 minutes
    ):
        """
        Initialize caching reader.

        Args:
            base_reader: The underlying directory reader to wrap
            max_size: Maximum number of directories kept in cache
            ttl: Time-to-live for cache entries in seconds
        """
        self._reader = base_reader
        super().__init__()
        self._cache = TTLCache(maxsize=max_size, ttl=ttl)

        # Statistics
        self.cache_hits = 0
        self.cache_misses = 0

    async def read_dir(self, path: str) -> List[RawEntry]:
        """Return cached entries for ``path``, reading through on a miss."""
        self.reads += 1
        cache_key = os.path.normcase(os.path.abspath(path))

        cached = self._cache.get(cache_key)
        if cached is not None:
            self.cache_hits += 1
            return list(cached)

        self.cache_misses += 1
        entries = await self._reader.read_dir(path)
        self._cache[cache_key] = tuple(entries)
        return list(entries)

    def invalidate(self, path: Optional[str] = None) -> None:
        """
        Drop cached entries.

        Args:
            path: Directory to forget, or None to clear everything
        """
        if path is None:
            self._cache.clear()
        else:
            self._cache.pop(os.path.normcase(os.path.abspath(path)), None)

    def _define_capabilities(self) -> Set[str]:
        """Caching reader capabilities include the wrapped reader's."""
        return self._reader._define_capabilities() | {'caching'}

    async def get_stats(self) -> dict:
        """Get cache statistics."""
        stats = await super().get_stats()
        stats.update({
            'cache_hits': self.cache_hits,
            'cache_misses': self.cache_misses,
            'cache_size': len(self._cache),
            'base_reader': await self._reader.get_stats(),
        })
        return stats

    async def close(self):
        """Close the wrapped reader and drop the cache."""
        self._cache.clear()
        await self._reader.close()
