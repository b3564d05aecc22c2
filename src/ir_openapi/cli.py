"""CLI entry point for ir-openapi."""

import json
from pathlib import Path

import click
import yaml

from ir_openapi.converter.components import build_components
from ir_openapi.converter.naming import get_schema_name, get_schema_reference
from ir_openapi.errors import IrToOpenApiError
from ir_openapi.ir.document import IntermediateRepresentation
from ir_openapi.ir.loader import load_ir
from ir_openapi.logging_config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, configure_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _load(ir_path: Path) -> IntermediateRepresentation:
    try:
        return load_ir(ir_path)
    except IrToOpenApiError as e:
        raise click.ClickException(str(e)) from e


def _render(fragment: dict, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(fragment, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(fragment, sort_keys=False, allow_unicode=True)


@click.group()
@click.option(
    "--log-level",
    default=DEFAULT_LOG_LEVEL,
    envvar=LOG_LEVEL_ENV,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level for diagnostics on stderr.",
)
def main(log_level: str):
    """ir-openapi: convert API IR types and auth into OpenAPI v3 components."""
    configure_logging(log_level)


@main.command()
@click.argument("ir_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Output file path. Defaults to stdout.")
@click.option("--format", "fmt", default="yaml", type=click.Choice(["yaml", "json"]), help="Output format.")
def convert(ir_path: Path, output: Path | None, fmt: str):
    """Convert an IR file into an OpenAPI components/security fragment."""
    ir = _load(ir_path)
    try:
        fragment = build_components(ir)
    except IrToOpenApiError as e:
        raise click.ClickException(str(e)) from e

    rendered = _render(fragment, fmt)
    if output is None:
        click.echo(rendered, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")
    click.echo(
        f"Wrote {len(fragment['components']['schemas'])} schemas to {output}",
        err=True,
    )


@main.command()
@click.argument("ir_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def names(ir_path: Path):
    """List the schema name and $ref of every declared type."""
    ir = _load(ir_path)
    for type_declaration in ir.types:
        click.echo(f"{get_schema_name(type_declaration.name)}\t{get_schema_reference(type_declaration.name)}")
