import asyncio
import hashlib
import logging
import os
import shutil
from datetime import datetime, timezone
from typing import List

from typed_fs.application.interfaces.i_file_system import IFileSystem
from typed_fs.domain.entities.file_system_entry import FileSystemEntry
from typed_fs.domain.exceptions.domain_exceptions import PathNotFoundError
from typed_fs.domain.value_objects.absolute_path import AbsolutePath
from typed_fs.domain.value_objects.hash_value import H
from typed_fs.domain.value_objects.relative_path import RelativePath
from typed_fs.domain.value_objects.sha1 import Sha1
from typed_fs.domain.value_objects.sha256 import Sha256

logger = logging.getLogger(__name__)


class LocalFileSystem(IFileSystem):
    """Concrete implementation of file system operations on the local disk."""

    DEFAULT_CHUNK_SIZE = 64 * 1024

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self._chunk_size = chunk_size

    def compute_sha1(self, path: AbsolutePath) -> Sha1:
        return self._compute(path, Sha1)

    def compute_sha256(self, path: AbsolutePath) -> Sha256:
        return self._compute(path, Sha256)

    def _compute(self, path: AbsolutePath, hash_type: type[H]) -> H:
        digest = hashlib.new(hash_type.ALGORITHM)
        try:
            with open(path, "rb") as stream:
                for chunk in iter(lambda: stream.read(self._chunk_size), b""):
                    digest.update(chunk)
        except FileNotFoundError as e:
            raise PathNotFoundError(f"File not found: {path}") from e

        result = hash_type.from_digest(digest)
        logger.debug("Computed %s of %s: %s", hash_type.ALGORITHM, path, result)
        return result

    def file_exists(self, path: AbsolutePath) -> bool:
        return os.path.isfile(path)

    def directory_exists(self, path: AbsolutePath) -> bool:
        return os.path.isdir(path)

    def read_all_text(self, path: AbsolutePath) -> str:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError as e:
            raise PathNotFoundError(f"File not found: {path}") from e

    def read_all_bytes(self, path: AbsolutePath) -> bytes:
        try:
            with open(path, "rb") as f:
                return f.read()
        except FileNotFoundError as e:
            raise PathNotFoundError(f"File not found: {path}") from e

    def write_all_text(self, path: AbsolutePath, content: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.debug("Wrote %d characters to %s", len(content), path)

    def write_all_bytes(self, path: AbsolutePath, data: bytes) -> None:
        with open(path, "wb") as f:
            f.write(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def create_directory(self, path: AbsolutePath) -> None:
        os.makedirs(path, exist_ok=True)

    def delete_file(self, path: AbsolutePath) -> None:
        try:
            os.remove(path)
        except FileNotFoundError as e:
            raise PathNotFoundError(f"File not found: {path}") from e
        logger.debug("Deleted file %s", path)

    def delete_directory(self, path: AbsolutePath, recursive: bool = False) -> None:
        if not os.path.isdir(path):
            raise PathNotFoundError(f"Directory not found: {path}")

        if recursive:
            shutil.rmtree(path)
        else:
            os.rmdir(path)
        logger.debug("Deleted directory %s (recursive=%s)", path, recursive)

    def rename(self, old_path: AbsolutePath, new_path: AbsolutePath) -> None:
        if not os.path.exists(old_path):
            raise PathNotFoundError(f"Path not found: {old_path}")

        os.replace(old_path, new_path)
        logger.debug("Renamed %s to %s", old_path, new_path)

    def enumerate_entries(self, path: AbsolutePath) -> List[FileSystemEntry]:
        """List the direct children of a directory."""
        try:
            scanner = os.scandir(path)
        except FileNotFoundError as e:
            raise PathNotFoundError(f"Directory not found: {path}") from e

        with scanner:
            return [self._to_entry(path, item) for item in scanner]

    async def enumerate_entries_async(
        self, path: AbsolutePath
    ) -> List[FileSystemEntry]:
        # Run the directory scan in a thread pool to not block
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, lambda: self.enumerate_entries(path))

    @staticmethod
    def _to_entry(directory: AbsolutePath, item: os.DirEntry) -> FileSystemEntry:
        try:
            stat = item.stat()
        except OSError:
            # dangling symlink, describe the link itself
            logger.debug("Cannot follow %s, using the link's own stat", item.path)
            stat = item.stat(follow_symlinks=False)
        is_directory = item.is_dir()
        name = RelativePath(item.name)
        return FileSystemEntry(
            path=directory + name,
            name=name,
            is_directory=is_directory,
            size=0 if is_directory else stat.st_size,
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )

