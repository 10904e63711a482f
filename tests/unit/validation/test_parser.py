"""Unit tests for the annotation parser."""

import pytest

from fieldcheck.models import ConstraintKind, ConstraintSpec
from fieldcheck.validation.errors import AnnotationError
from fieldcheck.validation.parser import parse_annotation


class TestStringAnnotations:
    """Tests for string length annotations (integer bounds)."""

    def test_min_and_max(self):
        spec = parse_annotation("string,min=1,max=10")

        assert spec.kind == ConstraintKind.STRING
        assert spec.minimum == 1
        assert spec.maximum == 10
        assert isinstance(spec.minimum, int)
        assert isinstance(spec.maximum, int)

    def test_min_only_defaults_max_to_zero(self):
        spec = parse_annotation("string,min=3")

        assert (spec.minimum, spec.maximum) == (3, 0)
        assert spec.has_upper_bound is False

    def test_max_only_defaults_min_to_zero(self):
        spec = parse_annotation("string,max=5")

        assert (spec.minimum, spec.maximum) == (0, 5)
        assert spec.has_upper_bound is True

    def test_no_bounds_is_unconstrained(self):
        spec = parse_annotation("string")

        assert spec.minimum == 0
        assert spec.maximum is None
        assert spec.has_upper_bound is False

    def test_bounds_in_any_order(self):
        spec = parse_annotation("string,max=8,min=2")

        assert (spec.minimum, spec.maximum) == (2, 8)

    def test_whitespace_around_tokens_is_ignored(self):
        spec = parse_annotation(" string , min = 2 , max= 4")

        assert spec.kind == ConstraintKind.STRING
        assert (spec.minimum, spec.maximum) == (2, 4)


class TestNumberAnnotations:
    """Tests for numeric range annotations (float bounds)."""

    def test_float_bounds(self):
        spec = parse_annotation("number,min=1.5,max=9.75")

        assert spec.kind == ConstraintKind.NUMBER
        assert spec.minimum == 1.5
        assert spec.maximum == 9.75

    def test_integer_literals_become_floats(self):
        spec = parse_annotation("number,min=1,max=10")

        assert isinstance(spec.minimum, float)
        assert isinstance(spec.maximum, float)

    def test_scientific_notation(self):
        assert parse_annotation("number,max=1e3").maximum == 1000.0

    def test_negative_min_keeps_zero_max(self):
        """An omitted max is 0, which is enforced when min is negative."""
        spec = parse_annotation("number,min=-5")

        assert (spec.minimum, spec.maximum) == (-5.0, 0)
        assert spec.has_upper_bound is True

    def test_no_bounds(self):
        spec = parse_annotation("number")

        assert spec == ConstraintSpec(kind=ConstraintKind.NUMBER, minimum=0, maximum=None)


class TestOtherKinds:
    def test_regex_pattern_is_verbatim(self):
        """Everything after the first comma is the pattern, commas included."""
        spec = parse_annotation(r"regex,^[a-z]{1,3},\d=x$")

        assert spec.kind == ConstraintKind.REGEX
        assert spec.pattern == r"^[a-z]{1,3},\d=x$"

    def test_email(self):
        spec = parse_annotation("email")

        assert spec.kind == ConstraintKind.EMAIL
        assert spec.pattern is None

    @pytest.mark.parametrize("annotation", ["uuid", "required", "", "String,min=1", "any"])
    def test_unrecognized_kind_is_always_valid(self, annotation):
        assert parse_annotation(annotation) == ConstraintSpec.always_valid()

    def test_unrecognized_kind_ignores_parameters(self):
        """Parameters of unknown kinds are never inspected."""
        assert parse_annotation("date,min=oops,,,") == ConstraintSpec.always_valid()

    def test_invalid_pattern_is_kept_by_default(self):
        assert parse_annotation("regex,([a-z]").pattern == "([a-z]"


class TestMalformedAnnotations:
    """Malformed parameter lists raise AnnotationError."""

    @pytest.mark.parametrize(
        "annotation",
        [
            "string,min=1,max=2,max=3",
            "number,min=1,max=2,extra",
            "string,length=5",
            "string,minimum=5",
            "number,min",
            "string,",
            "string,min=1,min=2",
            "number,min=abc",
            "number,max=",
            "number,min=nan",
            "string,min=1.5",
            "regex",
            "regex,",
        ],
    )
    def test_raises(self, annotation):
        with pytest.raises(AnnotationError) as exc_info:
            parse_annotation(annotation)

        assert exc_info.value.annotation == annotation
        assert exc_info.value.reason
        assert exc_info.value.field is None

    def test_invalid_pattern_raises_when_compiling(self):
        with pytest.raises(AnnotationError, match="invalid pattern"):
            parse_annotation("regex,([a-z]", compile_patterns=True)

    def test_valid_pattern_passes_when_compiling(self):
        spec = parse_annotation(r"regex,\d+", compile_patterns=True)

        assert spec.pattern == r"\d+"

    def test_error_message_names_field(self):
        error = AnnotationError("string,bad", "expected min=<value> or max=<value>")

        attributed = error.for_field("username")

        assert attributed.field == "username"
        assert "username" in str(attributed)
        assert "string,bad" in str(attributed)
