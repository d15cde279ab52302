# src/jsonbind/tasks/cli.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Jsonbind CLI: validate JSON documents against record types.

Commands:
    validate TYPE FILE   Deserialize FILE as TYPE and print every error.
    fields TYPE          List the fields of a record type as the engine sees them.

TYPE is written ``package.module:QualName`` (e.g. ``myapp.models:Order``).

Exit codes:
    0  success
    1  validation failed (one JSON line per error on stdout)
    2  the file is not valid JSON
    3  no converter exists for TYPE

Environment:
    JSONBIND_LOG_LEVEL      Root log level.
    JSONBIND_INTEGER_BITS   Width of the built-in integer converter.
"""

from __future__ import annotations

import importlib
import json
from pathlib import Path
from typing import Any

import typer

from jsonbind.application.record_converter import RecordConverter
from jsonbind.application.registry import ConverterRegistry
from jsonbind.bootstrap import create_registry
from jsonbind.config.settings import get_settings
from jsonbind.domain.exceptions.conversion import JsonSyntaxError, NoConverterFoundError
from jsonbind.domain.result import Failure
from jsonbind.infrastructure.codec.json_text import parse_json, print_json
from jsonbind.infrastructure.logging.logger import configure_root_logging, get_json_logger

log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)

EXIT_VALIDATION_FAILED = 1
EXIT_INVALID_JSON = 2
EXIT_NO_CONVERTER = 3


@app.callback()
def _main() -> None:
    """Validate and normalize JSON against Python record types."""
    configure_root_logging(get_settings().log_level)


def _load_type(type_path: str) -> Any:
    """Import ``module:QualName`` and return the named attribute.

    Raises:
        typer.BadParameter: If the path is malformed or cannot be imported.
    """
    module_name, sep, qualname = type_path.partition(":")
    if not sep or not module_name or not qualname:
        raise typer.BadParameter(f"expected module:QualName, got {type_path!r}")
    try:
        target: Any = importlib.import_module(module_name)
        for part in qualname.split("."):
            target = getattr(target, part)
    except (ImportError, AttributeError) as exc:
        raise typer.BadParameter(f"cannot load {type_path!r}: {exc}") from exc
    return target


def _sealed_registry() -> ConverterRegistry:
    registry = create_registry(get_settings())
    registry.seal()
    return registry


def _emit(payload: dict[str, Any], *, err: bool = False) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False), err=err)


@app.command("validate")
def validate(
    type_path: str = typer.Argument(..., help="Target type as module:QualName."),
    file: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, readable=True, help="JSON document to validate."
    ),
    normalize: bool = typer.Option(
        False, "--normalize", help="Print the re-serialized document on success."
    ),
    indent: int = typer.Option(2, min=0, help="Indentation used with --normalize."),
) -> None:
    """Deserialize FILE as TYPE and report every validation error."""
    target = _load_type(type_path)
    registry = _sealed_registry()

    try:
        document = parse_json(file.read_bytes())
    except JsonSyntaxError as exc:
        _emit({"error": exc.code, "message": str(exc), **exc.details}, err=True)
        raise typer.Exit(code=EXIT_INVALID_JSON) from exc

    try:
        result = registry.deserialize(document, target)
    except NoConverterFoundError as exc:
        _emit({"error": exc.code, "message": str(exc)}, err=True)
        raise typer.Exit(code=EXIT_NO_CONVERTER) from exc

    if isinstance(result, Failure):
        errors = result.flatten()
        for error in errors:
            _emit({"path": error.path, "message": error.message})
        log.info("validation failed", extra={"file": str(file), "errors": len(errors)})
        raise typer.Exit(code=EXIT_VALIDATION_FAILED)

    if normalize:
        typer.echo(print_json(registry.serialize(result.value, target), indent=indent))
    else:
        typer.echo("ok")


@app.command("fields")
def fields(
    type_path: str = typer.Argument(..., help="Record type as module:QualName."),
) -> None:
    """List the fields of a record type with their resolved types."""
    target = _load_type(type_path)
    registry = _sealed_registry()
    try:
        converter = registry.resolve(target)
    except NoConverterFoundError as exc:
        _emit({"error": exc.code, "message": str(exc)}, err=True)
        raise typer.Exit(code=EXIT_NO_CONVERTER) from exc

    if not isinstance(converter, RecordConverter):
        _emit({"error": "NOT_A_RECORD", "message": f"{type_path} is not a record type"}, err=True)
        raise typer.Exit(code=EXIT_NO_CONVERTER)
    for record_field in converter.fields:
        typer.echo(f"{record_field.name}\t{record_field.type}")


if __name__ == "__main__":
    app()
