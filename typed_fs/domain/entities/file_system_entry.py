from dataclasses import dataclass
from datetime import datetime

from ..value_objects.absolute_path import AbsolutePath
from ..value_objects.relative_path import RelativePath


@dataclass(frozen=True)
class FileSystemEntry:
    """A file or directory found directly inside an enumerated directory."""

    path: AbsolutePath
    name: RelativePath
    is_directory: bool
    size: int
    last_modified: datetime
