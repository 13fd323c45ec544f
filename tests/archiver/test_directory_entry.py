"""Tests for directory entries and the filesystem reader."""

import os

import pytest

from dir2zip.archiver.directory_entry import DirectoryEntry, FileType, OSDirectoryReader


def test_entry_is_dir():
    assert DirectoryEntry("sub", "/src/sub", "sub", FileType.DIRECTORY).is_dir
    assert not DirectoryEntry("a.txt", "/src/a.txt", "a.txt", FileType.FILE).is_dir
    assert not DirectoryEntry("link", "/src/link", "link", FileType.SYMLINK).is_dir


def test_entry_equality():
    first = DirectoryEntry("a.txt", "/src/a.txt", "a.txt", FileType.FILE)
    second = DirectoryEntry("a.txt", "/src/a.txt", "a.txt", FileType.FILE)

    assert first == second
    assert hash(first) == hash(second)
    assert first != DirectoryEntry("a.txt", "/src/a.txt", "a.txt", FileType.DIRECTORY)
    assert "a.txt" in repr(first)


def test_reader_lists_sorted_children(plugin_tree):
    entries = OSDirectoryReader().list_entries(str(plugin_tree), "")

    assert [entry.name for entry in entries] == [".git", "a.txt", "node_modules", "sub"]
    assert [entry.file_type for entry in entries] == [
        FileType.DIRECTORY,
        FileType.FILE,
        FileType.DIRECTORY,
        FileType.DIRECTORY,
    ]
    assert entries[1].path == os.path.join(str(plugin_tree), "a.txt")


def test_reader_builds_relative_paths(plugin_tree):
    entries = OSDirectoryReader().list_entries(str(plugin_tree / "sub"), "sub")

    assert entries == [DirectoryEntry("b.txt", os.path.join(str(plugin_tree / "sub"), "b.txt"), "sub/b.txt", FileType.FILE)]


def test_reader_classifies_symlinks(tmp_path):
    (tmp_path / "target.txt").write_text("t")
    (tmp_path / "target-dir").mkdir()
    try:
        os.symlink(tmp_path / "target.txt", tmp_path / "file-link")
        os.symlink(tmp_path / "target-dir", tmp_path / "dir-link")
        os.symlink(tmp_path / "gone", tmp_path / "dangling")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks cannot be created here")

    types = {entry.name: entry.file_type for entry in OSDirectoryReader().list_entries(str(tmp_path), "")}

    assert types["file-link"] is FileType.FILE
    assert types["dir-link"] is FileType.SYMLINK
    assert types["dangling"] is FileType.SYMLINK
    assert types["target-dir"] is FileType.DIRECTORY


def test_reader_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        OSDirectoryReader().list_entries(str(tmp_path / "missing"), "")


def test_reader_on_file(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("x")

    with pytest.raises(NotADirectoryError):
        OSDirectoryReader().list_entries(str(path), "")
