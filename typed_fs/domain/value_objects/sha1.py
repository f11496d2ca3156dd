from typing import ClassVar

from .hash_value import HashValue


class Sha1(HashValue):
    """SHA-1 hash value (20 bytes / 160 bits)."""

    DIGEST_SIZE: ClassVar[int] = 20
    ALGORITHM: ClassVar[str] = "sha1"
