"""Shared pytest fixtures for Rit tests."""

import builtins
import errno
import os
import shutil
import tempfile
from pathlib import Path

import pytest

from rit.core.repository import Repository
from rit.core.index import IndexEntry


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def in_repo(repo, monkeypatch):
    """Run with the repository root as the current directory."""
    monkeypatch.chdir(repo.work_tree)
    monkeypatch.delenv('RIT_REMOTE_URL', raising=False)
    return repo


@pytest.fixture
def working_files(repo):
    """Create sample file structure in repository."""
    file1 = repo.work_tree / "test1.txt"
    file2 = repo.work_tree / "test2.txt"

    (repo.work_tree / "subdir").mkdir()
    file3 = repo.work_tree / "subdir" / "test3.txt"

    file1.write_text("Content 1")
    file2.write_text("Content 2")
    file3.write_text("Content 3")

    return {
        'file1': file1,
        'file2': file2,
        'file3': file3
    }


def make_entry(path, sha256=b'\xaa' * 32, **fields):
    """Build an IndexEntry with placeholder metadata."""
    values = dict(
        ctime=1000, ctime_ns=1, mtime=2000, mtime_ns=2,
        dev=3, ino=4, mode=0o100644, size=5,
    )
    values.update(fields)
    return IndexEntry(sha256=sha256, path=path, **values)


@pytest.fixture
def entry_factory():
    """Factory fixture for index entries."""
    return make_entry


class HalfWriter:
    """File wrapper that writes half the data and then fails with ENOSPC."""

    def __init__(self, f):
        self.f = f

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.f.close()
        return False

    def write(self, data):
        self.f.write(data[:len(data) // 2])
        self.f.flush()
        raise OSError(errno.ENOSPC, os.strerror(errno.ENOSPC))


class DiskSwitch:
    """Set ``full`` to make object store writes fail partway through."""
    full = False


@pytest.fixture
def disk(monkeypatch):
    """Control whether object store writes run out of space."""
    switch = DiskSwitch()
    real_open = builtins.open

    def store_open(file, mode='r', *args, **kwargs):
        f = real_open(file, mode, *args, **kwargs)
        return HalfWriter(f) if switch.full else f

    monkeypatch.setattr('rit.core.store.open', store_open, raising=False)
    return switch
