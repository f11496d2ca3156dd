from datetime import datetime
from typing import List

from pydantic import BaseModel

from .path_types import (
    AbsolutePathStr,
    FileExtensionStr,
    RelativePathStr,
    Sha1Str,
    Sha256Str,
)


class FileEntryDTO(BaseModel):
    """A single file or directory in a listing."""

    name: RelativePathStr
    relative_path: RelativePathStr
    extension: FileExtensionStr
    is_directory: bool
    size: int
    last_modified: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "name": "main.py",
                "relative_path": "src/main.py",
                "extension": ".py",
                "is_directory": False,
                "size": 1024,
                "last_modified": "2024-01-15T10:30:00Z",
            }
        }


class DirectoryListingDTO(BaseModel):
    """Direct children of a directory, directories first."""

    path: RelativePathStr
    entries: List[FileEntryDTO]


class FileHashDTO(BaseModel):
    """SHA-1 and SHA-256 digests of a file."""

    path: RelativePathStr
    sha1: Sha1Str
    sha256: Sha256Str

    class Config:
        json_schema_extra = {
            "example": {
                "path": "empty.txt",
                "sha1": "da39a3ee5e6b4b0d3255bfef95601890afd80709",
                "sha256": "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
            }
        }


class FileNodeDTO(BaseModel):
    """A node of the file tree with whatever children are loaded."""

    name: RelativePathStr
    relative_path: RelativePathStr
    is_directory: bool
    children_loaded: bool
    children: List["FileNodeDTO"] = []


class FileTreeDTO(BaseModel):
    """Top-level nodes under the root directory."""

    root: AbsolutePathStr
    max_depth: int
    nodes: List[FileNodeDTO]
