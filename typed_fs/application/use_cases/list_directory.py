from dataclasses import dataclass, field
from typing import FrozenSet

from typed_fs.application.common.entry_filter import (
    DEFAULT_IGNORED_DIRECTORIES,
    visible_entries,
)
from typed_fs.application.common.path_guard import relative_to_root, resolve_under_root
from typed_fs.application.dtos.file_dtos import DirectoryListingDTO, FileEntryDTO
from typed_fs.application.interfaces.i_file_system import IFileSystem
from typed_fs.domain.exceptions.domain_exceptions import PathNotFoundError
from typed_fs.domain.value_objects.absolute_path import AbsolutePath
from typed_fs.domain.value_objects.file_extension import FileExtension


@dataclass
class ListDirectoryUseCase:
    """Use case for listing the direct children of a directory below the root."""

    file_system: IFileSystem
    root_path: AbsolutePath
    ignored_directories: FrozenSet[str] = field(
        default_factory=lambda: DEFAULT_IGNORED_DIRECTORIES
    )

    async def execute(self, path: str = "") -> DirectoryListingDTO:
        directory = resolve_under_root(self.root_path, path)
        if not self.file_system.directory_exists(directory):
            raise PathNotFoundError(f"Directory not found: {path}")

        entries = await self.file_system.enumerate_entries_async(directory)

        return DirectoryListingDTO(
            path=relative_to_root(self.root_path, directory),
            entries=[
                FileEntryDTO(
                    name=entry.name,
                    relative_path=relative_to_root(self.root_path, entry.path),
                    extension=(
                        FileExtension.NONE if entry.is_directory else entry.name.extension
                    ),
                    is_directory=entry.is_directory,
                    size=entry.size,
                    last_modified=entry.last_modified,
                )
                for entry in visible_entries(entries, self.ignored_directories)
            ],
        )
