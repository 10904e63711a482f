"""Unit tests for the checker factory."""

import pytest

from fieldcheck.models import ConstraintKind, ConstraintSpec
from fieldcheck.validation.checkers import (
    AlwaysValidChecker,
    EmailChecker,
    LengthChecker,
    PatternChecker,
    RangeChecker,
)
from fieldcheck.validation.factory import build_checker
from fieldcheck.validation.parser import parse_annotation


@pytest.mark.parametrize(
    "annotation,expected",
    [
        ("string,min=1,max=10", LengthChecker(min=1, max=10)),
        ("string,min=3", LengthChecker(min=3, max=0)),
        ("string", LengthChecker(min=0, max=None)),
        ("number,min=0.5,max=2", RangeChecker(min=0.5, max=2.0)),
        ("number", RangeChecker(min=0.0, max=None)),
        (r"regex,\d{3}", PatternChecker(expr=r"\d{3}")),
        ("email", EmailChecker()),
        ("unknown", AlwaysValidChecker()),
    ],
)
def test_builds_checker_for_each_kind(annotation, expected):
    """Each parsed annotation maps to exactly one checker."""
    assert build_checker(parse_annotation(annotation)) == expected


def test_regex_without_pattern_is_always_valid():
    spec = ConstraintSpec(kind=ConstraintKind.REGEX)

    assert isinstance(build_checker(spec), AlwaysValidChecker)


def test_string_bounds_are_integers():
    checker = build_checker(ConstraintSpec(kind=ConstraintKind.STRING, minimum=2, maximum=4))

    assert isinstance(checker.min, int)
    assert isinstance(checker.max, int)


def test_checkers_are_immutable():
    checker = build_checker(parse_annotation("string,min=1"))

    with pytest.raises(AttributeError):
        checker.min = 5
