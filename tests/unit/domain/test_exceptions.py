"""
Unit tests for domain exceptions.
"""

import pytest

from typed_fs.domain.exceptions.domain_exceptions import (
    DomainError,
    InvalidFilePathError,
    InvalidHashError,
    PathFormatError,
    HashFormatError,
    PathNotFoundError,
    PathOutsideRootError,
)
from typed_fs.domain.value_objects import AbsolutePath, RelativePath, Sha1


class TestDomainExceptions:
    """Tests for domain exception hierarchy."""

    def test_domain_error_is_base(self):
        """Test that DomainError is the base exception."""
        error = DomainError("Base error")
        assert isinstance(error, Exception)
        assert str(error) == "Base error"

    @pytest.mark.parametrize(
        "error_type",
        [
            InvalidFilePathError,
            InvalidHashError,
            PathFormatError,
            HashFormatError,
            PathNotFoundError,
            PathOutsideRootError,
        ],
    )
    def test_subclasses_share_base(self, error_type):
        """Test that every error is a DomainError carrying its message."""
        error = error_type("Something went wrong")

        assert isinstance(error, DomainError)
        assert str(error) == "Something went wrong"

    def test_catch_by_base_class(self):
        """Test that value object failures can be caught by base class."""
        with pytest.raises(DomainError):
            AbsolutePath("relative")

        with pytest.raises(DomainError):
            RelativePath.parse(None)

        with pytest.raises(DomainError):
            Sha1.parse("nope")

    def test_construction_and_parse_errors_differ(self):
        """Test that constructors and parse report different error types."""
        with pytest.raises(InvalidFilePathError):
            AbsolutePath("relative")

        with pytest.raises(PathFormatError):
            AbsolutePath.parse("relative")

        with pytest.raises(InvalidHashError):
            Sha1(b"short")

        with pytest.raises(HashFormatError):
            Sha1.parse("short")

    def test_exception_with_no_message(self):
        """Test exception with no message."""
        error = DomainError()
        assert str(error) == ""
