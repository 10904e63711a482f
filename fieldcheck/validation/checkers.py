"""Built-in constraint checkers.

Each checker is a frozen dataclass implementing the ConstraintChecker
protocol: check(value) returns (valid, message) and never raises for a
violation.
"""

import numbers
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

# Compiled once at import and shared read-only by every EmailChecker
EMAIL_PATTERN = re.compile(r"[\w+\-.]+@[a-z\d\-]+(\.[a-z\d]+)*\.[a-z]+", re.ASCII)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_number(value: Any) -> float:
    """Normalize a real number or Decimal to float; anything else counts as 0.

    bool is not treated as a number.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (numbers.Real, Decimal)):
        return float(value)
    return 0.0


def _format_bound(bound: float) -> str:
    """Shortest exact text for a bound: 1000000 not 1e+06, 0.1234567 not 0.123457."""
    bound = float(bound)
    if bound.is_integer():
        return str(int(bound))
    return repr(bound)


@dataclass(frozen=True)
class AlwaysValidChecker:
    """Accepts every value. Used for unrecognized or disabled constraints."""

    def check(self, value: Any) -> tuple[bool, str | None]:
        return True, None


@dataclass(frozen=True)
class LengthChecker:
    """Checks presence and character length of a text value.

    Length is counted in characters, not bytes. The upper bound is only
    enforced when it is set and not below the lower bound.
    """

    min: int = 0
    max: int | None = None

    def check(self, value: Any) -> tuple[bool, str | None]:
        length = len(_as_text(value))

        if length < self.min:
            if self.min == 1:
                return False, "must not be empty"
            return False, f"must be at least {self.min} characters"

        if self.max is not None and self.max >= self.min and length > self.max:
            return False, f"maximum length is {self.max} characters"

        return True, None


@dataclass(frozen=True)
class PatternChecker:
    """Checks that a non-empty text value fully matches a regular expression.

    Empty values pass: absence is a presence concern, not a pattern one.
    The expression is compiled on every call, so an invalid expression
    is reported as the field's failure message.
    """

    expr: str

    def check(self, value: Any) -> tuple[bool, str | None]:
        text = _as_text(value)
        if text == "":
            return True, None

        try:
            compiled = re.compile(self.expr)
        except re.error as e:
            return False, str(e)

        if compiled.fullmatch(text) is None:
            return False, "does not match the required pattern"
        return True, None


@dataclass(frozen=True)
class RangeChecker:
    """Checks that a numeric value lies within [min, max].

    Accepts any real number (int, float, Decimal, Fraction, numpy scalars)
    and compares it as a float. Non-numeric values, bool included, count as 0.
    """

    min: float = 0.0
    max: float | None = None

    def check(self, value: Any) -> tuple[bool, str | None]:
        number = _as_number(value)

        if number < self.min:
            return False, f"must be at least {_format_bound(self.min)}"

        if self.max is not None and self.max >= self.min and number > self.max:
            return False, f"must not exceed {self.max:.2f}"

        return True, None


@dataclass(frozen=True)
class EmailChecker:
    """Checks that a value is a plausible email address."""

    def check(self, value: Any) -> tuple[bool, str | None]:
        if EMAIL_PATTERN.fullmatch(_as_text(value)) is None:
            return False, "is not a valid email address"
        return True, None
