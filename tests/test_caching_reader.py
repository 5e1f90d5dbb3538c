"""Tests for the TTL-cached directory reader."""

import asyncio
import os

import pytest

from fslistlib import FilesystemError
from fslistlib.aio import CachingDirectoryReader, list_files
from fslistlib.testing import SAMPLE_TREE, MemoryDirectoryReader

ROOT = os.path.abspath("cached-root")


@pytest.fixture
def base_reader():
    return MemoryDirectoryReader(ROOT, SAMPLE_TREE)


@pytest.mark.asyncio
async def test_repeated_listings_hit_cache(base_reader):
    reader = CachingDirectoryReader(base_reader)

    first = await list_files(ROOT, recurse=True, match="txt1", reader=reader)
    second = await list_files(ROOT, recurse=True, match="txt2", reader=reader)

    assert len(first) == 3
    assert len(second) == 3
    # root + 3 subdirectories, read once each
    assert base_reader.reads == 4
    assert reader.cache_hits == 4
    assert reader.cache_misses == 4


@pytest.mark.asyncio
async def test_cached_result_is_a_copy(base_reader):
    reader = CachingDirectoryReader(base_reader)

    entries = await reader.read_dir(ROOT)
    entries.clear()

    assert len(await reader.read_dir(ROOT)) == 6


@pytest.mark.asyncio
async def test_errors_are_not_cached(base_reader):
    base_reader.fail_on = {ROOT}
    reader = CachingDirectoryReader(base_reader)

    with pytest.raises(FilesystemError):
        await reader.read_dir(ROOT)

    base_reader.fail_on = set()
    assert len(await reader.read_dir(ROOT)) == 6
    assert base_reader.reads == 2


@pytest.mark.asyncio
async def test_invalidate(base_reader):
    reader = CachingDirectoryReader(base_reader)
    await reader.read_dir(ROOT)

    reader.invalidate(ROOT)
    await reader.read_dir(ROOT)
    reader.invalidate()
    await reader.read_dir(ROOT)

    assert base_reader.reads == 3


@pytest.mark.asyncio
async def test_expired_entries_are_read_again(base_reader):
    reader = CachingDirectoryReader(base_reader, ttl=0.01)

    await reader.read_dir(ROOT)
    await asyncio.sleep(0.1)
    await reader.read_dir(ROOT)

    assert base_reader.reads == 2


@pytest.mark.asyncio
async def test_stats_and_close(base_reader):
    async with CachingDirectoryReader(base_reader, max_size=10) as reader:
        await reader.read_dir(ROOT)
        await reader.read_dir(ROOT)
        stats = await reader.get_stats()

    assert stats['reads'] == 2
    assert stats['cache_hits'] == 1
    assert stats['cache_size'] == 1
    assert stats['base_reader'] == {'reads': 1}
    assert reader.supports_capability('caching')
    assert reader.supports_capability('read_dir')
