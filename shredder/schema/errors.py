"""Errors raised while parsing Iglu schema references."""

from __future__ import annotations


class InvalidSchemaUriError(ValueError):
    """Raised when a string is not a valid Iglu schema URI or criterion."""

    def __init__(self, value: str, expected: str) -> None:
        """Record the rejected value and the form that was expected."""
        self.value = value
        self.expected = expected
        super().__init__(f"{value!r} is not a valid {expected}")

    @classmethod
    def for_key(cls, value: str) -> InvalidSchemaUriError:
        """Return an error for a malformed schema key URI."""
        return cls(value, "Iglu schema URI (iglu:vendor/name/format/M-R-A)")

    @classmethod
    def for_criterion(cls, value: str) -> InvalidSchemaUriError:
        """Return an error for a malformed schema criterion URI."""
        return cls(value, "Iglu schema criterion (iglu:vendor/name/format/M-*-*)")

    @classmethod
    def for_version(cls, value: str) -> InvalidSchemaUriError:
        """Return an error for a malformed SchemaVer string."""
        return cls(value, "SchemaVer (MODEL-REVISION-ADDITION)")
