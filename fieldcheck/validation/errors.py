"""Validation error definitions."""

from dataclasses import dataclass


@dataclass
class ValidationError:
    """Represents a validation failure with descriptive message.

    Attributes:
        message: Failure message from the constraint checker
        field: Resolved display label of the failing field
    """

    message: str
    field: str | None = None

    def format(self, separator: str = "") -> str:
        """Render as label followed by message."""
        if self.field is None:
            return self.message
        return f"{self.field}{separator}{self.message}"


class FieldCheckError(Exception):
    """Base class for configuration errors raised by fieldcheck."""


class AnnotationError(FieldCheckError):
    """A field annotation that cannot be turned into a constraint."""

    def __init__(self, annotation: str, reason: str, field: str | None = None):
        self.annotation = annotation
        self.reason = reason
        self.field = field
        where = f" on field '{field}'" if field else ""
        super().__init__(f"Malformed annotation {annotation!r}{where}: {reason}")

    def for_field(self, field: str) -> "AnnotationError":
        """Return a copy of this error attributed to a field."""
        return AnnotationError(self.annotation, self.reason, field)


class SchemaError(FieldCheckError):
    """A record type whose fields cannot be described for validation."""
