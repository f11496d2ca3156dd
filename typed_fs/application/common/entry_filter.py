from typing import Iterable, List

from typed_fs.domain.entities.file_system_entry import FileSystemEntry
from typed_fs.domain.value_objects.relative_path import RelativePath

DEFAULT_IGNORED_DIRECTORIES = frozenset(
    {"bin", "obj", "node_modules", ".git", ".vs", ".idea"}
)


def should_ignore(
    name: RelativePath,
    is_directory: bool,
    ignored_directories: Iterable[str] = DEFAULT_IGNORED_DIRECTORIES,
) -> bool:
    """Hidden entries are always skipped, build and tool directories by name."""
    text = str(name)
    if text.startswith("."):
        return True
    if is_directory:
        return text in ignored_directories
    return False


def visible_entries(
    entries: Iterable[FileSystemEntry],
    ignored_directories: Iterable[str] = DEFAULT_IGNORED_DIRECTORIES,
) -> List[FileSystemEntry]:
    """Drop ignored entries and order directories first, then by name."""
    ignored = frozenset(ignored_directories)
    kept = [e for e in entries if not should_ignore(e.name, e.is_directory, ignored)]
    return sorted(kept, key=lambda e: (not e.is_directory, str(e.name).casefold()))
