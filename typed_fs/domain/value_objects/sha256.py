from typing import ClassVar

from .hash_value import HashValue


class Sha256(HashValue):
    """SHA-256 hash value (32 bytes / 256 bits)."""

    DIGEST_SIZE: ClassVar[int] = 32
    ALGORITHM: ClassVar[str] = "sha256"
