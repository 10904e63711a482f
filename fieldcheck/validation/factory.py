"""Checker factory: one checker per constraint kind."""

from fieldcheck.models import ConstraintKind, ConstraintSpec
from fieldcheck.validation.checkers import (
    AlwaysValidChecker,
    EmailChecker,
    LengthChecker,
    PatternChecker,
    RangeChecker,
)
from fieldcheck.validation.protocols import ConstraintChecker


def build_checker(spec: ConstraintSpec) -> ConstraintChecker:
    """Build the checker for a parsed annotation.

    Never fails: kinds without a dedicated checker get AlwaysValidChecker.
    """
    if spec.kind == ConstraintKind.STRING:
        maximum = None if spec.maximum is None else int(spec.maximum)
        return LengthChecker(min=int(spec.minimum), max=maximum)

    if spec.kind == ConstraintKind.NUMBER:
        maximum = None if spec.maximum is None else float(spec.maximum)
        return RangeChecker(min=float(spec.minimum), max=maximum)

    if spec.kind == ConstraintKind.REGEX and spec.pattern is not None:
        return PatternChecker(expr=spec.pattern)

    if spec.kind == ConstraintKind.EMAIL:
        return EmailChecker()

    return AlwaysValidChecker()
