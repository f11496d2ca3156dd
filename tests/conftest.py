"""
Shared pytest fixtures for all tests.
"""

import os
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from typing import List

from typed_fs.domain.entities.file_system_entry import FileSystemEntry
from typed_fs.domain.value_objects.absolute_path import AbsolutePath
from typed_fs.domain.value_objects.relative_path import RelativePath
from typed_fs.domain.value_objects.sha1 import Sha1
from typed_fs.domain.value_objects.sha256 import Sha256
from typed_fs.application.interfaces.i_file_system import IFileSystem


SEP = os.sep
IS_WINDOWS = os.name == "nt"

EMPTY_SHA1 = "da39a3ee5e6b4b0d3255bfef95601890afd80709"
EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
HELLO_SHA1 = "aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d"
HELLO_SHA256 = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"


def native(path: str) -> str:
    """Rewrite a ``/``-separated test path for the host platform."""
    return path.replace("/", SEP)


# ============================================================================
# Value Object Fixtures
# ============================================================================


@pytest.fixture
def absolute_root_text() -> str:
    return "C:\\repo" if IS_WINDOWS else "/repo"


@pytest.fixture
def root_path(absolute_root_text: str) -> AbsolutePath:
    return AbsolutePath(absolute_root_text)


@pytest.fixture
def test_relative_path() -> RelativePath:
    return RelativePath("src/main.py")


@pytest.fixture
def empty_sha1() -> Sha1:
    return Sha1.parse(EMPTY_SHA1)


@pytest.fixture
def empty_sha256() -> Sha256:
    return Sha256.parse(EMPTY_SHA256)


# ============================================================================
# File System Fixtures
# ============================================================================


def make_entry(
    directory: AbsolutePath, name: str, is_directory: bool = False, size: int = 0
) -> FileSystemEntry:
    relative = RelativePath(name)
    return FileSystemEntry(
        path=directory + relative,
        name=relative,
        is_directory=is_directory,
        size=0 if is_directory else size,
        last_modified=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_entries(root_path: AbsolutePath) -> List[FileSystemEntry]:
    return [
        make_entry(root_path, "README.md", size=120),
        make_entry(root_path, "src", is_directory=True),
        make_entry(root_path, ".git", is_directory=True),
        make_entry(root_path, "node_modules", is_directory=True),
        make_entry(root_path, ".env", size=12),
        make_entry(root_path, "app.py", size=2048),
        make_entry(root_path, "Docs", is_directory=True),
    ]


@pytest.fixture
def mock_file_system(sample_entries: List[FileSystemEntry]) -> MagicMock:
    """A file system whose root holds ``sample_entries`` and nothing deeper."""
    mock = MagicMock(spec=IFileSystem)
    mock.file_exists.return_value = True
    mock.directory_exists.return_value = True
    mock.compute_sha1.return_value = Sha1.parse(EMPTY_SHA1)
    mock.compute_sha256.return_value = Sha256.parse(EMPTY_SHA256)

    def enumerate_entries(path: AbsolutePath) -> List[FileSystemEntry]:
        return [e for e in sample_entries if e.path.parent == path]

    mock.enumerate_entries.side_effect = enumerate_entries
    mock.enumerate_entries_async = AsyncMock(side_effect=enumerate_entries)
    return mock


@pytest.fixture
def tmp_tree(tmp_path):
    """A small real directory tree under pytest's tmp_path."""
    (tmp_path / "src" / "pkg" / "deep").mkdir(parents=True)
    (tmp_path / "src" / "main.py").write_text("print('hi')\n", encoding="utf-8")
    (tmp_path / "src" / "pkg" / "mod.py").write_text("", encoding="utf-8")
    (tmp_path / "src" / "pkg" / "deep" / "leaf.txt").write_text("leaf", encoding="utf-8")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "lib.js").write_text("", encoding="utf-8")
    (tmp_path / ".hidden").write_text("secret", encoding="utf-8")
    (tmp_path / "empty.txt").write_bytes(b"")
    (tmp_path / "hello.txt").write_bytes(b"hello")
    return tmp_path


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "e2e: mark test as an end-to-end test"
    )
