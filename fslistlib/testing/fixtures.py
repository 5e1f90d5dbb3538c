"""Test fixtures for fslistlib consumers.

A tree layout is a list whose items are file names, ``{"dir": name,
"files": [...]}`` mappings for subdirectories (nested as deep as needed),
or ``{"other": name}`` for entries that are neither (links, sockets, ...).

``build_tree``/``remove_tree`` materialize a layout on disk.
``MemoryDirectoryReader`` serves one from memory in a fixed order, and
``RecordingFileOperations`` stands in for the file primitives without
touching the disk, so ordering and failure handling can be checked
deterministically.
"""

import errno
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..aio.core import AsyncDirectoryReader, AsyncFileOperations, EntryKind, RawEntry
from ..exceptions import FilesystemError

FILE_CONTENT = "0123456789"

# root
# ├── aaa.txt1, bbb.txt2, ccc.txt3
# ├── subDir1/ ddd.txt1, eee.txt2, fff.txt3
# ├── subDir2/ ggg.txt1, hhh.txt2, iii.txt3
# └── subDir3/ (empty)
SAMPLE_TREE: List[Union[str, Dict[str, Any]]] = [
    "aaa.txt1",
    "bbb.txt2",
    "ccc.txt3",
    {"dir": "subDir1", "files": ["ddd.txt1", "eee.txt2", "fff.txt3"]},
    {"dir": "subDir2", "files": ["ggg.txt1", "hhh.txt2", "iii.txt3"]},
    {"dir": "subDir3"},
]


def build_tree(base: Union[str, Path], layout: Optional[List[Any]] = None) -> Path:
    """Create ``layout`` under ``base``.

    Args:
        base: Existing directory to build into
        layout: Tree layout (defaults to SAMPLE_TREE); "other" items are skipped

    Returns:
        ``base`` as a Path
    """
    base = Path(base)
    for item in SAMPLE_TREE if layout is None else layout:
        if isinstance(item, str):
            (base / item).write_text(FILE_CONTENT)
        elif "dir" in item:
            subdir = base / item["dir"]
            subdir.mkdir()
            build_tree(subdir, item.get("files", []))
    return base


def remove_tree(base: Union[str, Path], layout: Optional[List[Any]] = None) -> None:
    """Remove exactly what ``build_tree`` created for ``layout``.

    Fails if anything else was added in between, which makes it a cheap
    check that an operation left no stray files behind.
    """
    base = Path(base)
    for item in SAMPLE_TREE if layout is None else layout:
        if isinstance(item, str):
            (base / item).unlink()
        elif "dir" in item:
            subdir = base / item["dir"]
            remove_tree(subdir, item.get("files", []))
            subdir.rmdir()


class MemoryDirectoryReader(AsyncDirectoryReader):
    """Directory reader serving a layout from memory, in layout order.

    Example:
        reader = MemoryDirectoryReader("/data", SAMPLE_TREE, fail_on={"/data/subDir2"})
    """

    def __init__(self, root: str, layout: Optional[List[Any]] = None,
                 fail_on: Iterable[str] = ()):
        super().__init__()
        self.root = os.path.abspath(root)
        self.directories: Dict[str, List[RawEntry]] = {}
        self.fail_on = {os.path.abspath(p) for p in fail_on}
        self.read_paths: List[str] = []
        self._add(self.root, SAMPLE_TREE if layout is None else layout)

    def _add(self, directory: str, layout: List[Any]) -> None:
        entries = []
        for item in layout:
            if isinstance(item, str):
                entries.append(RawEntry(item, EntryKind.FILE))
            elif "dir" in item:
                entries.append(RawEntry(item["dir"], EntryKind.DIRECTORY))
                self._add(os.path.join(directory, item["dir"]), item.get("files", []))
            else:
                entries.append(RawEntry(item["other"], EntryKind.UNKNOWN))
        self.directories[directory] = entries

    async def read_dir(self, path: str) -> List[RawEntry]:
        self.reads += 1
        self.read_paths.append(path)
        if path in self.fail_on:
            raise FilesystemError(errno.EACCES, "Permission denied", path)
        if path not in self.directories:
            raise FilesystemError(errno.ENOENT, "No such file or directory", path)
        return list(self.directories[path])


class RecordingFileOperations(AsyncFileOperations):
    """File primitives that only record calls.

    Any call whose first path argument is listed in ``fail_on`` raises
    FilesystemError instead.
    """

    def __init__(self, fail_on: Iterable[str] = ()):
        self.fail_on = set(fail_on)
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def _record(self, operation: str, *args) -> None:
        self.calls.append((operation, args))
        if args and args[0] in self.fail_on:
            raise FilesystemError(errno.EIO, f"{operation} failed", args[0])

    def called(self, operation: str) -> List[Tuple[Any, ...]]:
        """Arguments of every call to ``operation``, in order."""
        return [args for name, args in self.calls if name == operation]

    async def ensure_dir(self, path: str) -> None:
        self._record('ensure_dir', path)

    async def copy_file(self, src: str, dst: str, overwrite: bool = True) -> None:
        self._record('copy_file', src, dst)

    async def rename_file(self, src: str, dst: str) -> None:
        self._record('rename_file', src, dst)

    async def delete_file(self, path: str) -> None:
        self._record('delete_file', path)
