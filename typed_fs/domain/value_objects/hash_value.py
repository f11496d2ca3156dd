import re
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, TypeVar

from ..exceptions.domain_exceptions import HashFormatError, InvalidHashError

H = TypeVar("H", bound="HashValue")


@dataclass(frozen=True, eq=False)
class HashValue:
    """Immutable fixed-length digest rendered as lowercase hex.

    The constructor is strict about length. ``default()`` is the one relaxed
    state: zero bytes, empty text, no error.
    """

    value: bytes

    DIGEST_SIZE: ClassVar[int] = 0
    ALGORITHM: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidHashError(f"{self._label()} hash bytes cannot be None.")

        if not isinstance(self.value, (bytes, bytearray, memoryview)):
            raise InvalidHashError(
                f"{self._label()} hash must be bytes, got {type(self.value).__name__}."
            )

        data = bytes(self.value)
        if len(data) != self.DIGEST_SIZE:
            raise InvalidHashError(
                f"{self._label()} hash must be {self.DIGEST_SIZE} bytes, got {len(data)}."
            )
        object.__setattr__(self, "value", data)

    @classmethod
    def _label(cls) -> str:
        return cls.ALGORITHM.upper().replace("SHA", "SHA-")

    @classmethod
    def default(cls: type[H]) -> H:
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", b"")
        return instance

    @classmethod
    def from_digest(cls: type[H], digest: Any) -> H:
        """Build from a finished ``hashlib`` object of the matching algorithm."""
        return cls(digest.digest())

    @classmethod
    def parse(cls: type[H], s: Optional[str]) -> H:
        """Parse exactly ``2 * DIGEST_SIZE`` hex characters."""
        pattern = rf"[0-9a-fA-F]{{{cls.DIGEST_SIZE * 2}}}"
        if s is None or not re.fullmatch(pattern, s):
            raise HashFormatError(f"Unable to parse '{s}' as {cls.__name__}.")
        return cls(bytes.fromhex(s))

    @classmethod
    def try_parse(cls: type[H], s: Optional[str]) -> Optional[H]:
        try:
            return cls.parse(s)
        except HashFormatError:
            return None

    @property
    def is_empty(self) -> bool:
        return not self.value

    def sequence_equal(self, other: bytes) -> bool:
        return self.value == bytes(other)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        # Container hash only, the first four bytes are enough.
        if len(self.value) < 4:
            return 0
        return int.from_bytes(self.value[:4], "little", signed=True)

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return self.value.hex()
