class DomainError(Exception):
    """Base exception for all domain-level errors."""

    pass


class InvalidFilePathError(DomainError):
    """Raised when a path is empty or has the wrong rootedness for its type."""

    pass


class InvalidHashError(DomainError):
    """Raised when hash bytes are missing or have the wrong length."""

    pass


class PathFormatError(DomainError):
    """Raised when text cannot be parsed as a path."""

    pass


class HashFormatError(DomainError):
    """Raised when text cannot be parsed as a hex-encoded hash."""

    pass


class PathNotFoundError(DomainError):
    """Raised when a file or directory does not exist."""

    pass


class PathOutsideRootError(DomainError):
    """Raised when a requested path escapes the configured root directory."""

    pass
