"""Attachment codec errors.

Every codec failure carries the path of the offending wire field so callers
can report which part of an inbound payload was rejected.
"""

from __future__ import annotations

from pydantic import ValidationError

FieldPath = tuple[str | int, ...]


def _loc_of(error: ValidationError) -> FieldPath:
    errors = error.errors()
    return tuple(errors[0]["loc"]) if errors else ()


class AttachmentCodecError(ValueError):
    """Base class for attachment encoding and decoding failures.

    This is a subclass of ValueError for consistency with the pydantic
    validation errors it wraps.

    Attributes:
        path: Location of the offending field, outermost key first.
    """

    def __init__(self, message: str, path: FieldPath = ()) -> None:
        self.path = path
        super().__init__(message)

    @property
    def field_path(self) -> str:
        """Dotted form of ``path`` (e.g., 'content.version')."""
        return ".".join(str(part) for part in self.path)


class AttachmentDecodeError(AttachmentCodecError):
    """Raised when wire data cannot be decoded into an Attachment."""


class MissingOrInvalidFieldError(AttachmentDecodeError):
    """Raised when a required field is absent or has the wrong type."""

    @classmethod
    def for_field(cls, path: FieldPath, expected: str) -> MissingOrInvalidFieldError:
        """Create an error for a field that is missing or not of the expected type."""
        dotted = ".".join(str(part) for part in path)
        return cls(f"Field '{dotted}' is missing or is not a valid {expected}", path)

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> MissingOrInvalidFieldError:
        """Translate a top-level payload validation failure."""
        path = _loc_of(error)
        dotted = ".".join(str(part) for part in path) or "<root>"
        message = error.errors()[0]["msg"] if error.errors() else str(error)
        return cls(f"Field '{dotted}' is missing or invalid: {message}", path)


class NestedDecodeError(AttachmentDecodeError):
    """Raised when a nested payload decoder rejects its portion of the data.

    Attributes:
        payload_kind: Name of the payload type whose decoder failed.
    """

    def __init__(self, message: str, path: FieldPath, payload_kind: str) -> None:
        self.payload_kind = payload_kind
        super().__init__(message, path)

    @classmethod
    def from_validation_error(
        cls, error: ValidationError, base: FieldPath, payload_kind: str
    ) -> NestedDecodeError:
        """Translate a nested payload validation failure, prefixing ``base``."""
        path = base + _loc_of(error)
        dotted = ".".join(str(part) for part in path)
        message = error.errors()[0]["msg"] if error.errors() else str(error)
        return cls(f"Could not decode {payload_kind} at '{dotted}': {message}", path, payload_kind)


class AttachmentEncodeError(AttachmentCodecError):
    """Raised when an Attachment cannot be encoded into wire data."""


class UnsupportedEncodingError(AttachmentEncodeError):
    """Raised when encoding content that has no wire representation."""

    def __init__(self, path: FieldPath = ("content",)) -> None:
        super().__init__("Encoding for this content is not supported.", path)
