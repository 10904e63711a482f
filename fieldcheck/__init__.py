"""Declarative field validation for dataclasses, pydantic models and mappings."""

from fieldcheck.config import DEFAULT_CONFIG, FieldCheckConfig
from fieldcheck.models import ConstraintKind, ConstraintSpec
from fieldcheck.validation import (
    AnnotationError,
    FieldCheckError,
    FieldDescriptor,
    RecordSchema,
    RecordValidator,
    SchemaError,
    ValidationError,
    ValidationReport,
    build_checker,
    get_record_validator,
    parse_annotation,
    validate_record,
    validated,
)

__all__ = [
    "DEFAULT_CONFIG",
    "AnnotationError",
    "ConstraintKind",
    "ConstraintSpec",
    "FieldCheckConfig",
    "FieldCheckError",
    "FieldDescriptor",
    "RecordSchema",
    "RecordValidator",
    "SchemaError",
    "ValidationError",
    "ValidationReport",
    "build_checker",
    "get_record_validator",
    "parse_annotation",
    "validate_record",
    "validated",
]
