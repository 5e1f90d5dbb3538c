"""Unit tests for the Entry model and name splitting."""

import os

import pytest

from fslistlib.aio import Entry, EntryKind
from fslistlib.aio.core import split_name


@pytest.mark.parametrize("name, base_name, extension", [
    ("results.jpeg", "results", "jpeg"),
    ("archive.tar.gz", "archive.tar", "gz"),
    ("README", "README", ""),
    (".profile", ".profile", ""),
    (".config.json", ".config", "json"),
    ("notes.", "notes.", ""),
    ("..", "..", ""),
    ("..abc", ".", "abc"),
    ("...txt", "..", "txt"),
    (".bashrc.bak", ".bashrc", "bak"),
])
def test_split_name(name, base_name, extension):
    assert split_name(name) == (base_name, extension)


@pytest.mark.parametrize("name", ["a.txt", "noext", ".hidden", "x.y.z", "trailing.", "..abc"])
def test_name_invariant(name):
    entry = Entry.from_parent(os.path.abspath("base"), name, EntryKind.FILE)

    if entry.extension:
        assert entry.name == entry.base_name + "." + entry.extension
    else:
        assert entry.name == entry.base_name


def test_entry_paths():
    parent = os.path.abspath("base")
    entry = Entry.from_parent(parent, "a.txt", EntryKind.FILE)

    assert entry.full_path == os.path.join(parent, "a.txt")
    assert os.fspath(entry) == entry.full_path
    assert str(entry) == entry.full_path
    assert entry.is_file and not entry.is_dir


def test_entry_kind_values():
    assert [kind.value for kind in EntryKind] == ["file", "directory", "unknown"]
