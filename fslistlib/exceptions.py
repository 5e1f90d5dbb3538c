"""Exception hierarchy for fslistlib.

Every error raised on purpose by the library derives from FsListError, so
callers can catch the whole family at once, while the concrete classes also
derive from the matching builtin (ValueError, OSError) for code that only
knows about those.
"""

from typing import Any, Optional


class FsListError(Exception):
    """Base class for all fslistlib errors."""


class ConfigurationError(FsListError, ValueError):
    """Invalid option value or combination.

    Always raised before any filesystem access takes place.
    """


class FilesystemError(FsListError, OSError):
    """A filesystem primitive failed (read dir, copy, rename, delete, mkdir)."""

    operation: Optional[str] = None

    @classmethod
    def from_os_error(cls, error: OSError, operation: str) -> "FilesystemError":
        """Translate an OSError, keeping errno, strerror and filenames.

        Args:
            error: The original OSError
            operation: Name of the primitive that failed (e.g. 'copy_file')

        Returns:
            A FilesystemError carrying the same details
        """
        if error.errno is None:
            translated = cls(*error.args)
        elif error.filename2 is not None:
            # rename failures name both paths
            translated = cls(error.errno, error.strerror, error.filename, None, error.filename2)
        elif error.filename is not None:
            translated = cls(error.errno, error.strerror, error.filename)
        else:
            translated = cls(error.errno, error.strerror)
        translated.operation = operation
        return translated


class PredicateError(FsListError):
    """A user supplied match or recurse predicate raised.

    This aborts the whole traversal; no partial results are returned.
    """

    def __init__(self, message: str, entry: Any = None, original: Optional[BaseException] = None):
        super().__init__(message)
        self.entry = entry
        self.original = original
