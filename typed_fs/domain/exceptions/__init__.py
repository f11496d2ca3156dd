from .domain_exceptions import (
    DomainError,
    InvalidFilePathError,
    InvalidHashError,
    PathFormatError,
    HashFormatError,
    PathNotFoundError,
    PathOutsideRootError,
)

__all__ = [
    "DomainError",
    "InvalidFilePathError",
    "InvalidHashError",
    "PathFormatError",
    "HashFormatError",
    "PathNotFoundError",
    "PathOutsideRootError",
]
