"""Asynchronous implementation of fslistlib.

This package contains the native async/await listing engine and batch file
set. Every filesystem call is awaited; work is strictly sequential.
"""

# Core abstractions
from .core import (
    Entry,
    EntryKind,
    RawEntry,
    AsyncDirectoryReader,
    AsyncFileOperations,
    AsyncListingTraverser,
    FileSet,
    get_file_path,
)

# Adapters
from .adapters import (
    AsyncFileSystemReader,
    AsyncFileSystemOperations,
)
from .caching import CachingDirectoryReader

# Cleanup policies
from .cleanup_policies import (
    CleanupPolicy,
    NaturalOutcome,
    ResolveOutcome,
    ExplicitErrorOutcome,
    create_cleanup_policy,
)

# High-level API
from .api import (
    list_files,
    copy_files,
    move_files,
    cleanup_files,
)

# Configuration (re-exported from _common)
from .._common import (
    ListingConfig,
    MatchField,
    TypeFilter,
    ResultShape,
)

__all__ = [
    # Core abstractions
    'Entry',
    'EntryKind',
    'RawEntry',
    'AsyncDirectoryReader',
    'AsyncFileOperations',
    'AsyncListingTraverser',
    'FileSet',
    'get_file_path',
    # Adapters
    'AsyncFileSystemReader',
    'AsyncFileSystemOperations',
    'CachingDirectoryReader',
    # Cleanup policies
    'CleanupPolicy',
    'NaturalOutcome',
    'ResolveOutcome',
    'ExplicitErrorOutcome',
    'create_cleanup_policy',
    # Configuration
    'ListingConfig',
    'MatchField',
    'TypeFilter',
    'ResultShape',
    # High-level API
    'list_files',
    'copy_files',
    'move_files',
    'cleanup_files',
]
