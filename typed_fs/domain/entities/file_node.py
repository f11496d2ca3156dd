from dataclasses import dataclass, field
from typing import List, Optional

from ..value_objects.absolute_path import AbsolutePath
from ..value_objects.relative_path import RelativePath


@dataclass(eq=False)
class FileNode:
    """A file or directory in a lazily loaded file tree."""

    name: RelativePath
    relative_path: RelativePath
    is_directory: bool = False
    is_expanded: bool = False
    children_loaded: bool = False
    children: List["FileNode"] = field(default_factory=list)
    parent: Optional["FileNode"] = field(default=None, repr=False)

    def add_child(self, node: "FileNode") -> None:
        node.parent = self
        self.children.append(node)

    def full_path(self, base_path: AbsolutePath) -> AbsolutePath:
        return base_path + self.relative_path

    def find_by_path(self, relative_path: RelativePath) -> Optional["FileNode"]:
        """Depth-first search for the node at ``relative_path``."""
        if self.relative_path == relative_path:
            return self

        for child in self.children:
            found = child.find_by_path(relative_path)
            if found is not None:
                return found
        return None
