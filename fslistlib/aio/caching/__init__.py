"""
Caching layer for fslistlib directory readers.
"""

from .adapter import CachingDirectoryReader

__all__ = ['CachingDirectoryReader']
