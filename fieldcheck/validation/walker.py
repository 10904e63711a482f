"""Record walker: validates every annotated field of a record."""

import logging
from typing import Any, Final

from fieldcheck.config import DEFAULT_CONFIG, FieldCheckConfig
from fieldcheck.validation.report import ValidationReport
from fieldcheck.validation.schema import RecordSchema

logger = logging.getLogger(__name__)


class RecordValidator:
    """Validates records against their (cached) record schemas.

    Schemas are built on first use of a record type, or up front with
    register(). Building a schema parses every annotation, so in strict
    mode a malformed annotation fails there rather than mid-validation.
    """

    def __init__(self, config: FieldCheckConfig = DEFAULT_CONFIG):
        """Initialize the validator.

        Args:
            config: Annotation keys, skip sentinel and malformed-annotation policy
        """
        self.config = config
        self._schemas: dict[type, RecordSchema] = {}

    def register(self, record_type: type, schema: RecordSchema | None = None) -> RecordSchema:
        """Build (or accept) and cache the schema for a record type.

        Args:
            record_type: Type whose instances will be validated
            schema: Explicit schema, for types that are not dataclasses or
                pydantic models

        Returns:
            The cached schema
        """
        if schema is None:
            schema = RecordSchema.from_type(record_type, self.config)
        self._schemas[record_type] = schema
        return schema

    def schema_for(self, record_type: type) -> RecordSchema:
        """Return the cached schema for a type, building it on first use."""
        schema = self._schemas.get(record_type)
        if schema is None:
            schema = self.register(record_type)
        return schema

    def report(self, record: Any, schema: RecordSchema | None = None) -> ValidationReport:
        """Validate a record and return the full report.

        Every validated field is checked; failures never stop the walk.

        Args:
            record: Record instance to validate (not modified)
            schema: Explicit schema, overriding the one cached for the type

        Returns:
            Report with one entry per violated constraint, in field order
        """
        if schema is None:
            schema = self.schema_for(type(record))

        report = ValidationReport(separator=self.config.label_separator)
        for schema_field in schema.fields:
            descriptor = schema_field.descriptor
            valid, message = schema_field.checker.check(descriptor.value_of(record))
            if not valid and message is not None:
                report.add(descriptor.display_label, message)

        logger.debug(f"Validated {type(record).__name__}: {len(report)} error(s)")
        return report

    def validate(self, record: Any, schema: RecordSchema | None = None) -> list[str]:
        """Validate a record and return its error messages (empty if valid)."""
        return self.report(record, schema).messages()


_VALIDATOR: Final[RecordValidator] = RecordValidator()


def get_record_validator() -> RecordValidator:
    """Return the process-wide record validator instance."""
    return _VALIDATOR


def validate_record(record: Any) -> list[str]:
    """Validate a record with the process-wide validator.

    Args:
        record: Dataclass or pydantic model instance, or an instance of a type
            registered with an explicit schema

    Returns:
        One message per violated constraint, prefixed with the field label
    """
    return _VALIDATOR.validate(record)


def validated(record_type: type | None = None, *, validator: RecordValidator | None = None):
    """Class decorator that builds and caches a record type's schema.

    Malformed annotations are therefore reported at class definition in
    strict mode. Usable as ``@validated`` or ``@validated(validator=v)``.
    """

    def decorate(cls: type) -> type:
        (validator or _VALIDATOR).register(cls)
        return cls

    if record_type is None:
        return decorate
    return decorate(record_type)
