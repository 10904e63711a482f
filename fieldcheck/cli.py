"""Command line helpers for checking annotations and validating JSON records.

Usage:
    fieldcheck parse "string,min=1,max=64"
    fieldcheck validate myapp.forms:SignupForm signup.json
    fieldcheck validate myapp.forms:SignupForm signup.json --strict
"""

import dataclasses
import importlib
import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import BaseModel

from fieldcheck.config import FieldCheckConfig
from fieldcheck.validation import AnnotationError, RecordValidator, SchemaError, parse_annotation

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="Check field annotations and validate records")


def load_record_type(target: str) -> type:
    """Import a record type from a "package.module:ClassName" reference."""
    module_name, sep, class_name = target.partition(":")
    if not sep or not module_name or not class_name:
        raise typer.BadParameter(f"Expected module:ClassName, got {target!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f"Cannot import {module_name}: {e}") from e

    record_type = getattr(module, class_name, None)
    if not isinstance(record_type, type):
        raise typer.BadParameter(f"{module_name} has no class {class_name}")
    return record_type


def build_record(record_type: type, data: dict[str, Any]) -> Any:
    """Instantiate a dataclass or pydantic model from a JSON object."""
    if issubclass(record_type, BaseModel):
        return record_type.model_validate(data)
    if dataclasses.is_dataclass(record_type):
        return record_type(**data)
    raise SchemaError(f"{record_type.__name__} is neither a dataclass nor a pydantic model")


@app.command()
def parse(
    annotation: Annotated[str, typer.Argument(help="Annotation text, e.g. 'number,min=1'")],
) -> None:
    """Parse an annotation and print its constraint spec as JSON."""
    try:
        spec = parse_annotation(annotation, compile_patterns=True)
    except AnnotationError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(spec.model_dump_json())


@app.command()
def validate(
    target: Annotated[str, typer.Argument(help="Record type as module:ClassName")],
    record_file: Annotated[
        Path, typer.Argument(exists=True, dir_okay=False, help="JSON file holding one record")
    ],
    strict: Annotated[
        bool, typer.Option(help="Fail on malformed annotations instead of skipping the field")
    ] = False,
) -> None:
    """Validate a JSON record against the annotations of a record type."""
    record_type = load_record_type(target)
    config = FieldCheckConfig(strict=strict)

    try:
        data = json.loads(record_file.read_text(encoding="utf-8"))
        record = build_record(record_type, data)
        errors = RecordValidator(config).validate(record)
    except (AnnotationError, SchemaError) as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)
    except (ValueError, TypeError) as e:
        typer.secho(f"Cannot build {record_type.__name__}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    if not errors:
        typer.secho("✓ Record is valid", fg=typer.colors.GREEN)
        return

    for message in errors:
        typer.echo(message)
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
