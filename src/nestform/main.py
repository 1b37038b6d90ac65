from __future__ import annotations

import json
import logging
from typing import NoReturn, Optional

import typer

from nestform.config import settings
from nestform.exceptions import MalformedPathError, UnknownIndexingError
from nestform.forms.decoder import NestedFormDecoder
from nestform.forms.paths import field_name
from nestform.forms.submission import parse_urlencoded
from nestform.service import EnrollmentService
from nestform.records.store import Registry

cli = typer.Typer(help="nestform CLI (nested form decoding)")


def _decoder(root_key: Optional[str], group_key: Optional[str], indexing: Optional[str]) -> NestedFormDecoder:
    return NestedFormDecoder(
        root_key=root_key or settings.forms.root_key,
        group_key=group_key or settings.forms.group_key,
        indexing=indexing or settings.forms.indexing,
    )


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=2)


@cli.callback()
def main(
    log_level: Optional[str] = typer.Option(None, help="Override the configured log level"),
) -> None:
    level = (log_level or settings.logging.level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))


@cli.command()
def version() -> None:
    """Print runtime version."""
    typer.echo(f"{settings.app.name} {settings.app.version}")


@cli.command("decode")
def decode_command(
    body: str = typer.Argument(..., help="application/x-www-form-urlencoded body"),
    root_key: Optional[str] = typer.Option(None, help="Root namespace, e.g. student"),
    group_key: Optional[str] = typer.Option(None, help="Repeated group key, e.g. courses"),
    indexing: Optional[str] = typer.Option(None, help="anonymous | explicit"),
) -> None:
    """Decode one submission and print the root record and its children as JSON."""
    try:
        form = _decoder(root_key, group_key, indexing).decode(parse_urlencoded(body))
    except (MalformedPathError, UnknownIndexingError) as exc:
        _fail(exc)
    typer.echo(form.model_dump_json(indent=2))


@cli.command("enroll")
def enroll_command(
    bodies: list[str] = typer.Argument(..., help="One urlencoded body per submission"),
    indexing: Optional[str] = typer.Option(None, help="anonymous | explicit"),
) -> None:
    """Create records for each submission in order and print every stored record."""
    try:
        service = EnrollmentService(registry=Registry(), decoder=_decoder(None, None, indexing))
        for body in bodies:
            service.enroll_body(body)
    except (MalformedPathError, UnknownIndexingError) as exc:
        _fail(exc)

    payload = {
        "students": [student.model_dump() for student in service.students()],
        "courses": [course.model_dump() for course in service.courses()],
    }
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@cli.command("fields")
def fields_command(
    children: int = typer.Option(2, min=0, help="Number of repeated children"),
    root_field: list[str] = typer.Option(["name", "grade"], help="Root record field (repeatable)"),
    child_field: list[str] = typer.Option(["name", "topic"], help="Child record field (repeatable)"),
    explicit: bool = typer.Option(False, help="Number the children instead of using []"),
) -> None:
    """Print the input names a form of this shape submits, in order."""
    root_key = settings.forms.root_key
    group_key = settings.forms.group_key
    for name in root_field:
        typer.echo(field_name(root_key, name))
    for index in range(children):
        for name in child_field:
            typer.echo(field_name(root_key, name, group_key=group_key, index=index if explicit else None))


if __name__ == "__main__":
    cli()
