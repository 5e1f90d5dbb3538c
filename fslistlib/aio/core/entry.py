"""Directory entry model.

An Entry describes one item found while listing a directory: its name
split into base name and extension, its absolute path and its kind.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class EntryKind(Enum):
    """What a directory entry is, as reported by the directory reader."""
    FILE = "file"
    DIRECTORY = "directory"
    UNKNOWN = "unknown"     # symlinks, sockets, devices, ...


def split_name(name: str) -> Tuple[str, str]:
    """Split a file name into (base_name, extension).

    The extension is whatever follows the last dot, without the dot. A
    dot in first position does not start an extension, so ".profile" has
    none, and neither does a trailing dot ("notes."). Further leading dots
    count as part of the base name: "..abc" splits into (".", "abc").

    Args:
        name: File name without any directory part

    Returns:
        Tuple of (base_name, extension)
    """
    dot = name.rfind('.')
    if dot <= 0 or dot == len(name) - 1:
        return name, ''
    return name[:dot], name[dot + 1:]


@dataclass(frozen=True)
class Entry:
    """One listed filesystem entry.

    ``name == base_name`` when ``extension`` is empty, otherwise
    ``name == base_name + "." + extension``. ``full_path`` is always
    absolute.
    """

    name: str
    base_name: str
    extension: str
    full_path: str
    kind: EntryKind

    @classmethod
    def from_parent(cls, parent: str, name: str, kind: EntryKind) -> "Entry":
        """Build an entry for ``name`` found in the absolute directory ``parent``."""
        base_name, extension = split_name(name)
        return cls(
            name=name,
            base_name=base_name,
            extension=extension,
            full_path=os.path.join(parent, name),
            kind=kind,
        )

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def __fspath__(self) -> str:
        return self.full_path

    def __str__(self) -> str:
        return self.full_path
