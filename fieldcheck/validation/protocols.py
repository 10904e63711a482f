"""Validation protocol definitions."""

from typing import Any, Protocol


class ConstraintChecker(Protocol):
    """Protocol for single-field constraint checkers.

    A checker is an immutable predicate over one field value. It never
    mutates the value and never raises for a constraint violation.
    """

    def check(self, value: Any) -> tuple[bool, str | None]:
        """Check a field value.

        Args:
            value: Current runtime value of the field

        Returns:
            Tuple of (valid, message); message is None when valid
        """
        ...
