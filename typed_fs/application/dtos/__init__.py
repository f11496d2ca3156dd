from .path_types import (
    AbsolutePathStr,
    RelativePathStr,
    FileExtensionStr,
    Sha1Str,
    Sha256Str,
)
from .file_dtos import (
    FileEntryDTO,
    DirectoryListingDTO,
    FileHashDTO,
    FileNodeDTO,
    FileTreeDTO,
)

__all__ = [
    "AbsolutePathStr",
    "RelativePathStr",
    "FileExtensionStr",
    "Sha1Str",
    "Sha256Str",
    "FileEntryDTO",
    "DirectoryListingDTO",
    "FileHashDTO",
    "FileNodeDTO",
    "FileTreeDTO",
]
