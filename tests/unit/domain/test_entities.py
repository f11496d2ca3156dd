"""
Unit tests for domain entities.
"""

import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

from conftest import IS_WINDOWS, native
from typed_fs.domain.entities.file_node import FileNode
from typed_fs.domain.entities.file_system_entry import FileSystemEntry
from typed_fs.domain.value_objects import AbsolutePath, RelativePath


class TestFileSystemEntry:
    """Tests for FileSystemEntry entity."""

    def test_entry_creation(self, root_path: AbsolutePath):
        """Test entry creation with typed paths."""
        name = RelativePath("main.py")
        entry = FileSystemEntry(
            path=root_path + name,
            name=name,
            is_directory=False,
            size=42,
            last_modified=datetime(2024, 1, 15, tzinfo=timezone.utc),
        )

        assert entry.path.file_name == name
        assert entry.path.parent == root_path
        assert entry.size == 42

    def test_entry_immutability(self, root_path: AbsolutePath):
        """Test that entries cannot be modified."""
        entry = FileSystemEntry(
            path=root_path,
            name=RelativePath("repo"),
            is_directory=True,
            size=0,
            last_modified=datetime.now(timezone.utc),
        )

        with pytest.raises(FrozenInstanceError):
            entry.size = 1


class TestFileNode:
    """Tests for FileNode entity."""

    @pytest.fixture
    def tree(self) -> FileNode:
        """Build src/ with pkg/mod.py and main.py below it."""
        src = FileNode(RelativePath("src"), RelativePath("src"), is_directory=True)
        pkg = FileNode(RelativePath("pkg"), RelativePath("src/pkg"), is_directory=True)
        pkg.add_child(FileNode(RelativePath("mod.py"), RelativePath("src/pkg/mod.py")))
        src.add_child(pkg)
        src.add_child(FileNode(RelativePath("main.py"), RelativePath("src/main.py")))
        return src

    def test_node_defaults(self):
        """Test node creation with defaults."""
        node = FileNode(RelativePath("a.txt"), RelativePath("a.txt"))

        assert not node.is_directory
        assert not node.is_expanded
        assert not node.children_loaded
        assert node.children == []
        assert node.parent is None

    def test_add_child_sets_parent(self, tree: FileNode):
        """Test that add_child links both directions."""
        pkg = tree.children[0]

        assert pkg.parent is tree
        assert pkg.children[0].parent is pkg
        assert len(tree.children) == 2

    def test_find_by_path(self, tree: FileNode):
        """Test depth-first lookup."""
        found = tree.find_by_path(RelativePath("src/pkg/mod.py"))

        assert found is not None
        assert found.name == RelativePath("mod.py")

    def test_find_by_path_case_insensitive(self, tree: FileNode):
        """Test that lookup uses path equality."""
        assert tree.find_by_path(RelativePath("SRC\\Main.py")) is tree.children[1]

    def test_find_self(self, tree: FileNode):
        assert tree.find_by_path(RelativePath("src")) is tree

    def test_find_missing(self, tree: FileNode):
        assert tree.find_by_path(RelativePath("src/other.py")) is None

    def test_full_path(self, tree: FileNode):
        """Test resolving a node against a base directory."""
        base = AbsolutePath("C:\\work" if IS_WINDOWS else "/work")
        mod = tree.find_by_path(RelativePath("src/pkg/mod.py"))

        assert str(mod.full_path(base)) == str(base) + native("/src/pkg/mod.py")

    def test_repr_skips_parent(self, tree: FileNode):
        """Test that repr does not recurse through the parent link."""
        assert "parent" not in repr(tree.children[0])
