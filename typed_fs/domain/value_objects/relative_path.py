import os
from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar, Optional, Union

from ..exceptions.domain_exceptions import InvalidFilePathError, PathFormatError
from .file_extension import FileExtension
from .path_rules import (
    SEPARATOR,
    change_extension,
    collapse_separators,
    is_rooted,
    normalize_separators,
    split_extension,
    split_segments,
)


@total_ordering
@dataclass(frozen=True, eq=False)
class RelativePath:
    """Immutable value object representing an unrooted file system path.

    Separators are rewritten to ``os.sep``, duplicate separators collapse and a
    trailing separator is dropped. ``.`` and ``..`` segments are kept as-is.
    Comparison is case-insensitive.
    """

    value: str = ""

    EMPTY: ClassVar["RelativePath"]

    def __post_init__(self) -> None:
        raw = self.value
        if raw is None:
            raw = ""
        elif isinstance(raw, os.PathLike):
            raw = os.fspath(raw)

        normalized = collapse_separators(normalize_separators(raw))
        if is_rooted(normalized):
            raise InvalidFilePathError(f"Path '{raw}' is absolute, not relative.")

        if normalized.endswith(SEPARATOR):
            normalized = normalized[:-1]

        object.__setattr__(self, "value", normalized)

    @property
    def is_empty(self) -> bool:
        return not self.value

    @property
    def segments(self) -> tuple[str, ...]:
        """Non-empty path parts in order."""
        return split_segments(self.value)

    @property
    def file_name(self) -> "RelativePath":
        """Last segment of the path."""
        return self._or_empty(os.path.basename(self.value))

    @property
    def file_name_without_extension(self) -> "RelativePath":
        stem, _ = split_extension(os.path.basename(self.value))
        return self._or_empty(stem)

    @property
    def extension(self) -> FileExtension:
        _, ext = split_extension(os.path.basename(self.value))
        return FileExtension(ext)

    @property
    def parent(self) -> "RelativePath":
        """Every segment but the last, or ``EMPTY`` for a single segment."""
        return self._or_empty(os.path.dirname(self.value))

    def change_extension(
        self, new_extension: Union[FileExtension, str, None]
    ) -> "RelativePath":
        """Replace, add or (with ``FileExtension.NONE``) remove the extension."""
        ext = FileExtension(new_extension)
        return self._or_empty(change_extension(self.value, ext.with_dot))

    @classmethod
    def parse(cls, s: Optional[str]) -> "RelativePath":
        """Parse a relative path, raising PathFormatError on null or rooted text."""
        if s is None or is_rooted(s):
            raise PathFormatError(f"Unable to parse '{s}' as RelativePath.")
        return cls(s)

    @classmethod
    def try_parse(cls, s: Optional[str]) -> Optional["RelativePath"]:
        """Parse a relative path, returning None instead of raising."""
        try:
            return cls.parse(s)
        except (PathFormatError, InvalidFilePathError):
            return None

    @classmethod
    def _or_empty(cls, path: str) -> "RelativePath":
        return cls(path) if path else cls.EMPTY

    def __add__(self, other: object) -> "RelativePath":
        if isinstance(other, str):
            if not other:
                return self
            other = RelativePath(other)
        elif not isinstance(other, RelativePath):
            return NotImplemented

        if self.is_empty:
            return other
        if other.is_empty:
            return self
        return RelativePath(os.path.join(self.value, other.value))

    def __radd__(self, other: object) -> "RelativePath":
        if isinstance(other, str):
            return RelativePath(other) + self
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RelativePath):
            return NotImplemented
        return self.value.casefold() == other.value.casefold()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RelativePath):
            return NotImplemented
        return self.value.casefold() < other.value.casefold()

    def __hash__(self) -> int:
        return hash(self.value.casefold())

    def __fspath__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


RelativePath.EMPTY = RelativePath("")
