"""Aggregation of field failures for one record evaluation."""

from collections.abc import Iterator

from fieldcheck.validation.errors import ValidationError


class ValidationReport:
    """Ordered failures of one record evaluation.

    Failures are kept in the order they are added, which is field
    declaration order when filled by RecordValidator. An empty report
    means the record is valid.
    """

    def __init__(self, separator: str = ""):
        self.separator = separator
        self._errors: list[ValidationError] = []

    def add(self, label: str, message: str) -> None:
        """Record a failure for the field with the given display label."""
        self._errors.append(ValidationError(message=message, field=label))

    @property
    def errors(self) -> list[ValidationError]:
        return list(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def messages(self) -> list[str]:
        """Failures rendered as label + separator + message."""
        return [error.format(self.separator) for error in self._errors]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    def __repr__(self) -> str:
        return f"ValidationReport(errors={self._errors!r})"
