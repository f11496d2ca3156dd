"""
Pydantic field types for the domain value objects.

Each value object travels as a single JSON string, parsed with the type's
``parse`` and written back with ``str()``.
"""

from typing import Annotated, Any, Callable, TypeVar

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from typed_fs.domain.exceptions.domain_exceptions import DomainError
from typed_fs.domain.value_objects.absolute_path import AbsolutePath
from typed_fs.domain.value_objects.file_extension import FileExtension
from typed_fs.domain.value_objects.relative_path import RelativePath
from typed_fs.domain.value_objects.sha1 import Sha1
from typed_fs.domain.value_objects.sha256 import Sha256

T = TypeVar("T")

_AS_TEXT = PlainSerializer(str, return_type=str)


def _parser(value_type: type[T], parse: Callable[[Any], T]) -> PlainValidator:
    def validate(value: Any) -> T:
        if isinstance(value, value_type):
            return value
        if not isinstance(value, str):
            raise ValueError(f"{value_type.__name__} must be a string")
        try:
            return parse(value)
        except DomainError as e:
            raise ValueError(str(e)) from e

    return PlainValidator(validate)


def _schema(description: str) -> WithJsonSchema:
    return WithJsonSchema({"type": "string", "description": description})


AbsolutePathStr = Annotated[
    AbsolutePath,
    _parser(AbsolutePath, AbsolutePath.parse),
    _AS_TEXT,
    _schema("Absolute file system path"),
]

RelativePathStr = Annotated[
    RelativePath,
    _parser(RelativePath, RelativePath.parse),
    _AS_TEXT,
    _schema("Relative file system path"),
]

FileExtensionStr = Annotated[
    FileExtension,
    _parser(FileExtension, FileExtension.parse),
    _AS_TEXT,
    _schema("File extension with leading dot"),
]

Sha1Str = Annotated[
    Sha1,
    _parser(Sha1, Sha1.parse),
    _AS_TEXT,
    _schema("Lowercase hex SHA-1 digest"),
]

Sha256Str = Annotated[
    Sha256,
    _parser(Sha256, Sha256.parse),
    _AS_TEXT,
    _schema("Lowercase hex SHA-256 digest"),
]
