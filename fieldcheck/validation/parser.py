"""Annotation parser.

Turns annotation text of the form ``kind[,param]*`` into a ConstraintSpec:

    string,min=1,max=64     character length between 1 and 64
    number,min=0.5          value of at least 0.5
    regex,^[A-Z]{3}$        pattern taken verbatim after the first comma
    email                   email address format

Unknown kinds parse to the Always-Valid spec. Malformed bound lists raise
AnnotationError; the caller decides whether that is fatal.
"""

import math
import re

from fieldcheck.models import ConstraintKind, ConstraintSpec
from fieldcheck.validation.errors import AnnotationError

BOUND_KEYS = ("min", "max")


def _parse_bound(annotation: str, raw: str, integer: bool) -> int | float:
    raw = raw.strip()
    try:
        value = int(raw) if integer else float(raw)
    except ValueError:
        expected = "an integer" if integer else "a number"
        raise AnnotationError(annotation, f"bound {raw!r} is not {expected}") from None

    if not integer and math.isnan(value):
        raise AnnotationError(annotation, "bound cannot be NaN")
    return value


def _parse_bounds(
    annotation: str, tokens: list[str], integer: bool
) -> tuple[int | float, int | float | None]:
    """Parse up to two ``min=``/``max=`` tokens.

    Returns:
        Tuple of (minimum, maximum). An absent bound is 0, except that an
        annotation with no bounds at all has no upper bound (maximum None).
    """
    zero = 0 if integer else 0.0
    if not tokens:
        return zero, None

    if len(tokens) > 2:
        raise AnnotationError(annotation, f"expected at most 2 bounds, got {len(tokens)}")

    bounds: dict[str, int | float] = {}
    for token in tokens:
        key, sep, raw = token.partition("=")
        key = key.strip()
        if key not in BOUND_KEYS or not sep:
            raise AnnotationError(annotation, f"expected min=<value> or max=<value>, got {token!r}")
        if key in bounds:
            raise AnnotationError(annotation, f"duplicate {key} bound")
        bounds[key] = _parse_bound(annotation, raw, integer)

    return bounds.get("min", zero), bounds.get("max", zero)


def parse_annotation(annotation: str, *, compile_patterns: bool = False) -> ConstraintSpec:
    """Parse one field annotation.

    Args:
        annotation: Annotation text, e.g. "number,min=1,max=10"
        compile_patterns: Also compile regex patterns and reject invalid ones

    Returns:
        Parsed constraint spec (Always-Valid for unrecognized kinds)

    Raises:
        AnnotationError: If the parameter list is malformed
    """
    kind_token, sep, remainder = annotation.partition(",")
    kind = ConstraintKind.from_token(kind_token)

    if kind in (ConstraintKind.STRING, ConstraintKind.NUMBER):
        integer = kind == ConstraintKind.STRING
        tokens = remainder.split(",") if sep else []
        minimum, maximum = _parse_bounds(annotation, tokens, integer)
        return ConstraintSpec(kind=kind, minimum=minimum, maximum=maximum)

    if kind == ConstraintKind.REGEX:
        if not remainder:
            raise AnnotationError(annotation, "regex annotation requires a pattern")
        if compile_patterns:
            try:
                re.compile(remainder)
            except re.error as e:
                raise AnnotationError(annotation, f"invalid pattern: {e}") from None
        return ConstraintSpec(kind=kind, pattern=remainder)

    if kind == ConstraintKind.EMAIL:
        return ConstraintSpec(kind=kind)

    return ConstraintSpec.always_valid()
