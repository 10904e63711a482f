"""Record schemas: the validated fields of one record type.

A schema is built once per record type from a statically declared list of
field descriptors. Annotations are parsed and checkers built at that point,
so evaluating a record only runs checkers.

Descriptors come from one of:
- dataclass fields: ``field(metadata={"validate": "string,min=1", "msg": "Name"})``
- pydantic model fields: ``Field(json_schema_extra={"validate": "email"}, alias="mail")``
- an explicit list of FieldDescriptor objects (any object or mapping)
"""

import dataclasses
import logging
import operator
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from fieldcheck.config import DEFAULT_CONFIG, FieldCheckConfig
from fieldcheck.models import ConstraintSpec
from fieldcheck.validation.errors import AnnotationError, SchemaError
from fieldcheck.validation.factory import build_checker
from fieldcheck.validation.parser import parse_annotation
from fieldcheck.validation.protocols import ConstraintChecker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """Declaration of one record field and its validation hints.

    Attributes:
        name: Declared field name
        accessor: Callable returning the field value from a record
            (defaults to attribute access by name)
        annotation: Constraint annotation, None or the skip sentinel to skip
        label: Explicit display label used in failure messages
        serialized_name: Wire/JSON name, used as label when no display label
    """

    name: str
    accessor: Callable[[Any], Any] | None = None
    annotation: str | None = None
    label: str | None = None
    serialized_name: str | None = None

    @classmethod
    def for_key(cls, key: str, annotation: str | None = None, **hints: str) -> "FieldDescriptor":
        """Descriptor for a mapping entry, read with record[key]."""
        return cls(name=key, accessor=operator.itemgetter(key), annotation=annotation, **hints)

    @property
    def display_label(self) -> str:
        """Label precedence: display label, then serialized name, then field name."""
        return self.label or self.serialized_name or self.name

    def value_of(self, record: Any) -> Any:
        if self.accessor is None:
            return getattr(record, self.name)
        return self.accessor(record)


@dataclass(frozen=True)
class SchemaField:
    """A validated field: its descriptor, parsed annotation and checker."""

    descriptor: FieldDescriptor
    spec: ConstraintSpec
    checker: ConstraintChecker


@dataclass(frozen=True)
class RecordSchema:
    """Ordered validated fields of one record type.

    Fields without an annotation, or annotated with the skip sentinel, are
    left out at build time.
    """

    fields: tuple[SchemaField, ...]
    record_type: type | None = None

    @classmethod
    def from_descriptors(
        cls,
        descriptors: Iterable[FieldDescriptor],
        config: FieldCheckConfig = DEFAULT_CONFIG,
        record_type: type | None = None,
    ) -> "RecordSchema":
        """Build a schema from explicit field descriptors.

        Raises:
            AnnotationError: In strict mode, if any annotation is malformed
            SchemaError: If an annotation is not a string
        """
        compiled = []
        for descriptor in descriptors:
            schema_field = _compile_field(descriptor, config)
            if schema_field is not None:
                compiled.append(schema_field)

        schema = cls(fields=tuple(compiled), record_type=record_type)
        name = record_type.__name__ if record_type else "explicit schema"
        logger.debug(f"Built schema for {name} with {len(compiled)} validated fields")
        return schema

    @classmethod
    def from_type(
        cls, record_type: type, config: FieldCheckConfig = DEFAULT_CONFIG
    ) -> "RecordSchema":
        """Build a schema from a dataclass or pydantic model type.

        Raises:
            SchemaError: If the type declares no inspectable fields
        """
        if isinstance(record_type, type) and issubclass(record_type, BaseModel):
            descriptors = _pydantic_descriptors(record_type, config)
        elif dataclasses.is_dataclass(record_type):
            descriptors = _dataclass_descriptors(record_type, config)
        else:
            raise SchemaError(
                f"Cannot describe fields of {record_type!r}: expected a dataclass or "
                "pydantic model, or register an explicit schema"
            )
        return cls.from_descriptors(descriptors, config, record_type=record_type)

    def __len__(self) -> int:
        return len(self.fields)


def _compile_field(descriptor: FieldDescriptor, config: FieldCheckConfig) -> SchemaField | None:
    annotation = descriptor.annotation
    if annotation is None:
        return None
    if not isinstance(annotation, str):
        raise SchemaError(
            f"Annotation for field '{descriptor.name}' must be a string, "
            f"got {type(annotation).__name__}"
        )
    if not annotation or annotation == config.skip_sentinel:
        return None

    try:
        spec = parse_annotation(annotation, compile_patterns=config.strict)
    except AnnotationError as e:
        if config.strict:
            raise e.for_field(descriptor.name) from e
        logger.warning(
            f"Field '{descriptor.name}' will not be validated, "
            f"malformed annotation {annotation!r}: {e.reason}"
        )
        spec = ConstraintSpec.always_valid()

    return SchemaField(descriptor=descriptor, spec=spec, checker=build_checker(spec))


def _hint(hints: Mapping[str, Any], key: str) -> str | None:
    value = hints.get(key)
    return value if value else None


def _dataclass_descriptors(record_type: type, config: FieldCheckConfig) -> list[FieldDescriptor]:
    return [
        FieldDescriptor(
            name=f.name,
            accessor=operator.attrgetter(f.name),
            annotation=f.metadata.get(config.tag_name),
            label=_hint(f.metadata, config.label_tag),
            serialized_name=_hint(f.metadata, config.serialized_tag),
        )
        for f in dataclasses.fields(record_type)
    ]


def _pydantic_descriptors(
    record_type: type[BaseModel], config: FieldCheckConfig
) -> list[FieldDescriptor]:
    descriptors = []
    for name, info in record_type.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        serialized = (
            _hint(extra, config.serialized_tag) or info.serialization_alias or info.alias
        )
        descriptors.append(
            FieldDescriptor(
                name=name,
                accessor=operator.attrgetter(name),
                annotation=extra.get(config.tag_name),
                label=_hint(extra, config.label_tag),
                serialized_name=serialized,
            )
        )
    return descriptors
