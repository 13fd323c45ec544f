"""Test configuration and fixtures for dir2zip."""

import zipfile

import pytest


@pytest.fixture
def plugin_tree(tmp_path):
    """Create a small plugin folder with build tooling mixed in."""
    source = tmp_path / "my-plugin"
    source.mkdir()
    (source / "a.txt").write_text("alpha")
    (source / ".git").mkdir()
    (source / ".git" / "config").write_text("[core]")
    (source / "node_modules").mkdir()
    (source / "node_modules" / "x.js").write_text("module.exports = {}")
    (source / "sub").mkdir()
    (source / "sub" / "b.txt").write_text("bravo")
    return source


def read_archive(path):
    """Return a mapping of archive entry name to entry bytes."""
    with zipfile.ZipFile(path) as zf:
        return {name: zf.read(name) for name in zf.namelist()}


@pytest.fixture
def archive_contents():
    return read_archive
