"""
Decode error kinds.

Every decode function either returns a fully populated entity or raises one
of the two concrete kinds below.
"""

from __future__ import annotations

from typing import Optional


class DecodeError(ValueError):
    """Base class for wire decoding failures."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class InvalidEncoding(DecodeError):
    """Malformed hex text, wrong byte length or non-hex characters."""


class MissingOrMismatchedField(DecodeError):
    """A required field is absent or has the wrong JSON shape."""
