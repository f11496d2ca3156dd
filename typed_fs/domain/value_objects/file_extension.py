from dataclasses import dataclass
from functools import total_ordering
from types import MappingProxyType
from typing import ClassVar, Mapping, Optional, Union

from .path_rules import EXTENSION_SEPARATOR


@total_ordering
@dataclass(frozen=True, eq=False)
class FileExtension:
    """Immutable value object representing a file extension such as ``.txt``.

    Any text is accepted. The value is trimmed, lowercased and given a leading
    dot, and empty input becomes ``FileExtension.NONE``.
    """

    value: str = ""

    NONE: ClassVar["FileExtension"]
    TXT: ClassVar["FileExtension"]
    JSON: ClassVar["FileExtension"]
    XML: ClassVar["FileExtension"]
    CS: ClassVar["FileExtension"]
    JS: ClassVar["FileExtension"]
    TS: ClassVar["FileExtension"]
    HTML: ClassVar["FileExtension"]
    CSS: ClassVar["FileExtension"]
    MD: ClassVar["FileExtension"]
    YAML: ClassVar["FileExtension"]
    YML: ClassVar["FileExtension"]
    PNG: ClassVar["FileExtension"]
    JPG: ClassVar["FileExtension"]
    GIF: ClassVar["FileExtension"]
    PDF: ClassVar["FileExtension"]
    ZIP: ClassVar["FileExtension"]
    EXE: ClassVar["FileExtension"]
    DLL: ClassVar["FileExtension"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.normalize(self.value))

    @staticmethod
    def normalize(extension: Union[str, "FileExtension", None]) -> str:
        """Return the canonical text of an extension."""
        if isinstance(extension, FileExtension):
            return extension.value
        if not extension:
            return ""

        extension = extension.strip()
        if not extension:
            return ""

        if not extension.startswith(EXTENSION_SEPARATOR):
            extension = EXTENSION_SEPARATOR + extension

        return extension.lower()

    @property
    def is_empty(self) -> bool:
        return not self.value

    @property
    def with_dot(self) -> str:
        """Extension with its leading dot, or an empty string."""
        return self.value

    @property
    def without_dot(self) -> str:
        """Extension without its leading dot, or an empty string."""
        return self.value[1:] if self.value else ""

    def is_one_of(self, *extensions: Union[str, "FileExtension", None]) -> bool:
        """Check whether this extension matches any candidate (case-insensitive)."""
        return any(self == ext for ext in extensions)

    @classmethod
    def parse(cls, s: Optional[str]) -> "FileExtension":
        """Parse an extension. Never fails, any text is a valid extension."""
        return cls(s)

    @classmethod
    def try_parse(cls, s: Optional[str]) -> "FileExtension":
        """Parse an extension. Always succeeds, ``None`` maps to ``NONE``."""
        if s is None:
            return cls.NONE
        return cls(s)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FileExtension):
            return self.value.casefold() == other.value.casefold()
        if isinstance(other, str):
            return self.value.casefold() == self.normalize(other).casefold()
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FileExtension):
            return NotImplemented
        return self.value.casefold() < other.value.casefold()

    def __hash__(self) -> int:
        return hash(self.value.casefold())

    def __bool__(self) -> bool:
        return not self.is_empty

    def __str__(self) -> str:
        return self.with_dot


FileExtension.NONE = FileExtension("")

COMMON_EXTENSIONS: Mapping[str, FileExtension] = MappingProxyType(
    {
        name: FileExtension(name)
        for name in (
            "txt",
            "json",
            "xml",
            "cs",
            "js",
            "ts",
            "html",
            "css",
            "md",
            "yaml",
            "yml",
            "png",
            "jpg",
            "gif",
            "pdf",
            "zip",
            "exe",
            "dll",
        )
    }
)

for _name, _extension in COMMON_EXTENSIONS.items():
    setattr(FileExtension, _name.upper(), _extension)

del _name, _extension
