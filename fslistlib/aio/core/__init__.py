"""Core abstractions for async listing and batch file operations.

This module defines the entry model, the collaborator interfaces, the
listing engine and the batch file set.
"""

from .entry import Entry, EntryKind, split_name
from .adapter import AsyncDirectoryReader, AsyncFileOperations, RawEntry
from .fileset import FileSet, get_file_path
from .traverser import AsyncListingTraverser

__all__ = [
    # Entry
    'Entry',
    'EntryKind',
    'split_name',
    # Collaborators
    'AsyncDirectoryReader',
    'AsyncFileOperations',
    'RawEntry',
    # File set
    'FileSet',
    'get_file_path',
    # Traverser
    'AsyncListingTraverser',
]
