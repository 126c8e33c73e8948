"""CLI entry point for service-contract."""

import logging
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from service_contract.envelope import ServiceRequest
from service_contract.schema.loader import SchemaLoadError, load_document, load_service_meta
from service_contract.schema.models import ServiceMeta
from service_contract.validation.engine import validate

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class LoadFailed(click.ClickException):
    exit_code = 2


def _load_schema(schema_path: Path) -> ServiceMeta:
    try:
        return load_service_meta(schema_path)
    except SchemaLoadError as e:
        raise LoadFailed(str(e)) from e


def _load_payload(request_path: Path, mode: str) -> tuple[Any, str]:
    """Load a request file as a document or an envelope, per ``mode``."""
    try:
        doc = load_document(request_path)
    except SchemaLoadError as e:
        raise LoadFailed(str(e)) from e

    if mode == "auto":
        mode = "envelope" if _looks_like_envelope(doc) else "document"

    if mode == "document":
        return doc, mode
    try:
        return ServiceRequest.model_validate(doc), mode
    except ValidationError as e:
        raise LoadFailed(f"{request_path}: not a valid request envelope ({e.error_count()} errors)") from e


def _looks_like_envelope(doc: Any) -> bool:
    return isinstance(doc, dict) and "uuid" in doc and isinstance(doc.get("parameters"), list)


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    envvar="SERVICE_CONTRACT_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level for validation diagnostics.",
)
def main(log_level: str):
    """Service Contract: inspect service schemas and validate requests against them."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def show(schema_path: Path):
    """List the actions and parameters declared by a schema."""
    meta = _load_schema(schema_path)
    click.echo(f"{meta.service_name}: {meta.description}")
    for action in meta.actions:
        click.echo(f"\n  {action.name}: {action.description}")
        for p in action.parameters:
            flags = "required" if p.required else "optional"
            if p.default is not None:
                flags += f", default={p.default}"
            click.echo(f"    {p.name}: {p.kind} [{flags}]")
        for o in action.outputs:
            click.echo(f"    -> {o.name}: {o.kind}")


@main.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("request_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--mode", default="auto", type=click.Choice(["auto", "document", "envelope"]), help="Validation mode.")
@click.pass_context
def check(ctx: click.Context, schema_path: Path, request_path: Path, mode: str):
    """Validate a request file against a schema. Exits 1 when rejected."""
    meta = _load_schema(schema_path)
    payload, mode = _load_payload(request_path, mode)

    result = validate(meta, payload, mode=mode)
    if result.ok:
        click.echo(f"ACCEPT ({mode}) {result.action_name}")
        return

    click.echo(f"REJECT ({mode}) {result.violation}")
    ctx.exit(1)
