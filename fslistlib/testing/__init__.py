"""Testing utilities for fslistlib consumers."""

from .fixtures import (
    SAMPLE_TREE,
    build_tree,
    remove_tree,
    MemoryDirectoryReader,
    RecordingFileOperations,
)

__all__ = [
    'SAMPLE_TREE',
    'build_tree',
    'remove_tree',
    'MemoryDirectoryReader',
    'RecordingFileOperations',
]
