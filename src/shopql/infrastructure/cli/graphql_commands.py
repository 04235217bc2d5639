"""CLI commands that talk GraphQL directly."""

from __future__ import annotations

import json
from pathlib import Path

import click

from shopql.infrastructure.api.schema import execute, schema
from shopql.infrastructure.bootstrap import ShopContext
from shopql.infrastructure.cli.context import pass_shop_context


def _load_document(raw: str) -> str:
    """Accept a document inline or as '@path/to/file.graphql'."""
    if raw.startswith("@"):
        path = Path(raw[1:])
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise click.BadParameter(f"Cannot read '{path}': {exc.strerror}")
    return raw


def _parse_variables(raw: str | None) -> dict | None:
    if raw is None:
        return None
    try:
        variables = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Variables are not valid JSON: {exc.msg}")
    if not isinstance(variables, dict):
        raise click.BadParameter("Variables must be a JSON object.")
    return variables


@click.command("query")
@click.argument("document")
@click.option("--variables", default=None, help="Variables as a JSON object.")
@pass_shop_context
def query(ctx: ShopContext, document: str, variables: str | None) -> None:
    """Execute a GraphQL DOCUMENT (inline or @file) and print the result."""
    result = execute(ctx, _load_document(document), _parse_variables(variables))
    click.echo(json.dumps(result.formatted, indent=2))
    if result.errors:
        raise click.exceptions.Exit(1)


@click.command("schema")
def schema_sdl() -> None:
    """Print the GraphQL schema (SDL)."""
    click.echo(str(schema))
