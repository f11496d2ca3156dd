import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List, Optional

from typed_fs.application.common.entry_filter import (
    DEFAULT_IGNORED_DIRECTORIES,
    visible_entries,
)
from typed_fs.application.dtos.file_dtos import FileNodeDTO, FileTreeDTO
from typed_fs.application.interfaces.i_file_system import IFileSystem
from typed_fs.domain.entities.file_node import FileNode
from typed_fs.domain.value_objects.absolute_path import AbsolutePath
from typed_fs.domain.value_objects.relative_path import RelativePath

logger = logging.getLogger(__name__)


@dataclass
class BuildFileTreeUseCase:
    """Use case for loading a directory tree lazily.

    The first load goes ``max_initial_depth`` levels below the top-level
    entries. Deeper directories are expanded on demand with load_children.
    """

    file_system: IFileSystem
    root_path: AbsolutePath
    max_initial_depth: int = 2
    ignored_directories: FrozenSet[str] = field(
        default_factory=lambda: DEFAULT_IGNORED_DIRECTORIES
    )

    async def execute(self) -> FileTreeDTO:
        nodes = await self.load()
        return FileTreeDTO(
            root=self.root_path,
            max_depth=self.max_initial_depth,
            nodes=[self._to_dto(node) for node in nodes],
        )

    async def load(self) -> List[FileNode]:
        """Load the top-level nodes, empty when the root doesn't exist."""
        nodes: List[FileNode] = []
        if not self.file_system.directory_exists(self.root_path):
            logger.warning("Root directory %s does not exist", self.root_path)
            return nodes

        await self._load_directory(RelativePath.EMPTY, nodes.append, 0)
        return nodes

    async def load_children(self, directory: FileNode) -> None:
        """Load the children of a directory node that wasn't expanded yet."""
        if not directory.is_directory or directory.children_loaded:
            return

        await self._load_directory(directory.relative_path, directory.add_child, 0)
        directory.children_loaded = True

    @staticmethod
    def find_by_path(
        nodes: List[FileNode], relative_path: RelativePath
    ) -> Optional[FileNode]:
        for node in nodes:
            found = node.find_by_path(relative_path)
            if found is not None:
                return found
        return None

    async def _load_directory(
        self,
        relative_path: RelativePath,
        add: Callable[[FileNode], None],
        current_depth: int,
    ) -> None:
        full_path = self.root_path + relative_path
        entries = await self.file_system.enumerate_entries_async(full_path)

        for entry in visible_entries(entries, self.ignored_directories):
            # Cancellation point between entries
            await asyncio.sleep(0)

            node = FileNode(
                name=entry.name,
                relative_path=relative_path + entry.name,
                is_directory=entry.is_directory,
            )
            add(node)

            if entry.is_directory and current_depth < self.max_initial_depth:
                node.children_loaded = True
                await self._load_directory(
                    node.relative_path, node.add_child, current_depth + 1
                )

    def _to_dto(self, node: FileNode) -> FileNodeDTO:
        return FileNodeDTO(
            name=node.name,
            relative_path=node.relative_path,
            is_directory=node.is_directory,
            children_loaded=node.children_loaded,
            children=[self._to_dto(child) for child in node.children],
        )
