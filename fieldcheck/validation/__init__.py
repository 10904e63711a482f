"""Validation package - annotation parsing, constraint checkers and record walking.

Records declare per-field annotations; RecordValidator builds a schema per
record type and returns a flat list of labeled failure messages.
"""

from fieldcheck.validation.checkers import (
    AlwaysValidChecker,
    EmailChecker,
    LengthChecker,
    PatternChecker,
    RangeChecker,
)
from fieldcheck.validation.errors import (
    AnnotationError,
    FieldCheckError,
    SchemaError,
    ValidationError,
)
from fieldcheck.validation.factory import build_checker
from fieldcheck.validation.parser import parse_annotation
from fieldcheck.validation.protocols import ConstraintChecker
from fieldcheck.validation.report import ValidationReport
from fieldcheck.validation.schema import FieldDescriptor, RecordSchema, SchemaField
from fieldcheck.validation.walker import (
    RecordValidator,
    get_record_validator,
    validate_record,
    validated,
)

__all__ = [
    "AlwaysValidChecker",
    "AnnotationError",
    "ConstraintChecker",
    "EmailChecker",
    "FieldCheckError",
    "FieldDescriptor",
    "LengthChecker",
    "PatternChecker",
    "RangeChecker",
    "RecordSchema",
    "RecordValidator",
    "SchemaError",
    "SchemaField",
    "ValidationError",
    "ValidationReport",
    "build_checker",
    "get_record_validator",
    "parse_annotation",
    "validate_record",
    "validated",
]
