from abc import ABC, abstractmethod
from typing import List

from typed_fs.domain.entities.file_system_entry import FileSystemEntry
from typed_fs.domain.value_objects.absolute_path import AbsolutePath
from typed_fs.domain.value_objects.sha1 import Sha1
from typed_fs.domain.value_objects.sha256 import Sha256


class IFileSystem(ABC):
    """Interface for file system operations on typed paths.

    Implementations never manipulate path strings themselves, every path
    goes in and comes out as an AbsolutePath or RelativePath.
    """

    @abstractmethod
    def compute_sha1(self, path: AbsolutePath) -> Sha1:
        """Stream a file through SHA-1."""
        pass

    @abstractmethod
    def compute_sha256(self, path: AbsolutePath) -> Sha256:
        """Stream a file through SHA-256."""
        pass

    @abstractmethod
    def file_exists(self, path: AbsolutePath) -> bool:
        pass

    @abstractmethod
    def directory_exists(self, path: AbsolutePath) -> bool:
        pass

    @abstractmethod
    def read_all_text(self, path: AbsolutePath) -> str:
        pass

    @abstractmethod
    def read_all_bytes(self, path: AbsolutePath) -> bytes:
        pass

    @abstractmethod
    def write_all_text(self, path: AbsolutePath, content: str) -> None:
        pass

    @abstractmethod
    def write_all_bytes(self, path: AbsolutePath, data: bytes) -> None:
        pass

    @abstractmethod
    def create_directory(self, path: AbsolutePath) -> None:
        """Create a directory and any missing parents."""
        pass

    @abstractmethod
    def delete_file(self, path: AbsolutePath) -> None:
        pass

    @abstractmethod
    def delete_directory(self, path: AbsolutePath, recursive: bool = False) -> None:
        """Delete a directory, with its contents when ``recursive`` is set."""
        pass

    @abstractmethod
    def rename(self, old_path: AbsolutePath, new_path: AbsolutePath) -> None:
        """Move a file or directory, raising PathNotFoundError if missing."""
        pass

    @abstractmethod
    def enumerate_entries(self, path: AbsolutePath) -> List[FileSystemEntry]:
        """List the direct children of a directory, in no particular order."""
        pass

    @abstractmethod
    async def enumerate_entries_async(
        self, path: AbsolutePath
    ) -> List[FileSystemEntry]:
        """Async variant of enumerate_entries."""
        pass
