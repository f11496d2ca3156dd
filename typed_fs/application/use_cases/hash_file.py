import asyncio
import logging
from dataclasses import dataclass

from typed_fs.application.common.path_guard import relative_to_root, resolve_under_root
from typed_fs.application.dtos.file_dtos import FileHashDTO
from typed_fs.application.interfaces.i_file_system import IFileSystem
from typed_fs.domain.exceptions.domain_exceptions import PathNotFoundError
from typed_fs.domain.value_objects.absolute_path import AbsolutePath

logger = logging.getLogger(__name__)


@dataclass
class HashFileUseCase:
    """Use case for computing the digests of a file below the root."""

    file_system: IFileSystem
    root_path: AbsolutePath

    async def execute(self, path: str) -> FileHashDTO:
        """Hash a file.

        Args:
            path: File path relative to the root directory

        Returns:
            FileHashDTO with SHA-1 and SHA-256 digests

        Raises:
            PathOutsideRootError: If the path escapes the root
            PathNotFoundError: If the file doesn't exist
        """
        target = resolve_under_root(self.root_path, path)
        if not self.file_system.file_exists(target):
            raise PathNotFoundError(f"File not found: {path}")

        # Hash in thread pool
        loop = asyncio.get_running_loop()
        sha1 = await loop.run_in_executor(None, self.file_system.compute_sha1, target)
        sha256 = await loop.run_in_executor(
            None, self.file_system.compute_sha256, target
        )
        logger.info("Hashed %s", target)

        return FileHashDTO(
            path=relative_to_root(self.root_path, target),
            sha1=sha1,
            sha256=sha256,
        )
