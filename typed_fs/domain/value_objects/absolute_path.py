import os
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Union

from ..exceptions.domain_exceptions import InvalidFilePathError, PathFormatError
from .file_extension import FileExtension
from .path_rules import (
    CURRENT_DIRECTORY,
    PARENT_DIRECTORY,
    SEPARATOR,
    change_extension,
    is_rooted,
    normalize_separators,
    path_root,
    split_extension,
    split_segments,
)
from .relative_path import RelativePath


@total_ordering
@dataclass(frozen=True, eq=False)
class AbsolutePath:
    """Immutable value object representing a rooted, fully resolved path.

    ``.`` and ``..`` are resolved lexically at construction, the file system
    is never consulted. Only the root itself keeps a trailing separator.
    Comparison is case-insensitive.
    """

    value: str

    def __post_init__(self) -> None:
        raw = self.value
        if isinstance(raw, os.PathLike):
            raw = os.fspath(raw)

        if raw is None or raw.strip() == "":
            raise InvalidFilePathError("Absolute path cannot be empty")

        if not is_rooted(raw):
            raise InvalidFilePathError(f"Path '{raw}' is not absolute (not rooted).")

        object.__setattr__(self, "value", self._resolve(raw))

    @staticmethod
    def _resolve(path: str) -> str:
        full_path = normalize_separators(os.path.abspath(normalize_separators(path)))

        # POSIX keeps a leading "//" as implementation-defined, fold it to "/".
        if SEPARATOR == "/" and full_path.startswith("//"):
            full_path = SEPARATOR + full_path.lstrip(SEPARATOR)

        if len(full_path) > len(path_root(full_path)):
            full_path = full_path.rstrip(SEPARATOR)

        return full_path

    @classmethod
    def current_directory(cls) -> "AbsolutePath":
        """The process working directory."""
        return cls(os.getcwd())

    @property
    def root(self) -> Optional["AbsolutePath"]:
        """The root of the path, e.g. ``/`` or ``C:\\``."""
        root = path_root(self.value)
        return AbsolutePath(root) if root else None

    @property
    def is_root(self) -> bool:
        return self.value == path_root(self.value)

    @property
    def parent(self) -> Optional["AbsolutePath"]:
        """One level up, or None when this path is its own root."""
        if self.is_root:
            return None
        return AbsolutePath(os.path.dirname(self.value))

    @property
    def file_name(self) -> RelativePath:
        name = os.path.basename(self.value)
        return RelativePath(name) if name else RelativePath.EMPTY

    @property
    def file_name_without_extension(self) -> RelativePath:
        stem, _ = split_extension(os.path.basename(self.value))
        return RelativePath(stem) if stem else RelativePath.EMPTY

    @property
    def extension(self) -> FileExtension:
        _, ext = split_extension(os.path.basename(self.value))
        return FileExtension(ext)

    def change_extension(
        self, new_extension: Union[FileExtension, str, None]
    ) -> "AbsolutePath":
        ext = FileExtension(new_extension)
        return AbsolutePath(change_extension(self.value, ext.with_dot))

    def starts_with(self, base_path: "AbsolutePath") -> bool:
        """Check whether this path lies at or below ``base_path``.

        Both sides are compared with a trailing separator so that ``/foo2``
        does not start with ``/foo``.
        """
        normalized_base = base_path.value.rstrip(SEPARATOR) + SEPARATOR
        normalized_this = self.value.rstrip(SEPARATOR) + SEPARATOR
        return normalized_this.casefold().startswith(normalized_base.casefold())

    def relative_to(self, base_path: "AbsolutePath") -> RelativePath:
        """Route from ``base_path`` to this path, e.g. ``../app2``.

        Equal paths yield ``.``. Segments match case-sensitively unless the
        host file system folds case (``os.path.normcase``).
        """
        this_root = path_root(self.value)
        base_root = path_root(base_path.value)
        if os.path.normcase(this_root) != os.path.normcase(base_root):
            raise InvalidFilePathError(
                f"Paths '{self}' and '{base_path}' do not share a common root."
            )

        to_segments = split_segments(self.value[len(this_root):])
        from_segments = split_segments(base_path.value[len(base_root):])

        common = 0
        for to_segment, from_segment in zip(to_segments, from_segments):
            if os.path.normcase(to_segment) != os.path.normcase(from_segment):
                break
            common += 1

        route = [PARENT_DIRECTORY] * (len(from_segments) - common)
        route.extend(to_segments[common:])
        if not route:
            return RelativePath(CURRENT_DIRECTORY)
        return RelativePath(SEPARATOR.join(route))

    @classmethod
    def parse(cls, s: Optional[str]) -> "AbsolutePath":
        """Parse an absolute path, raising PathFormatError on invalid text."""
        if s is None or s.strip() == "" or not is_rooted(s):
            raise PathFormatError(f"Unable to parse '{s}' as AbsolutePath.")
        return cls(s)

    @classmethod
    def try_parse(cls, s: Optional[str]) -> Optional["AbsolutePath"]:
        """Parse an absolute path, returning None instead of raising."""
        try:
            return cls.parse(s)
        except (PathFormatError, InvalidFilePathError):
            return None

    def __add__(self, other: object) -> "AbsolutePath":
        if isinstance(other, RelativePath):
            if other.is_empty:
                return self
            return AbsolutePath(os.path.join(self.value, other.value))

        if isinstance(other, FileExtension):
            if other.is_empty:
                return self
            return AbsolutePath(self.value + other.with_dot)

        if isinstance(other, str):
            if not other:
                return self
            # A rooted right-hand side replaces the left one, like os.path.join.
            if is_rooted(other):
                return AbsolutePath(other)
            return self + RelativePath(other)

        return NotImplemented

    def __sub__(self, other: object) -> RelativePath:
        """``to - from`` gives the relative route from ``from`` to ``to``."""
        if not isinstance(other, AbsolutePath):
            return NotImplemented
        return self.relative_to(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbsolutePath):
            return NotImplemented
        return self.value.casefold() == other.value.casefold()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AbsolutePath):
            return NotImplemented
        return self.value.casefold() < other.value.casefold()

    def __hash__(self) -> int:
        return hash(self.value.casefold())

    def __fspath__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
