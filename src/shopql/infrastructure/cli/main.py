import logging
from pathlib import Path

import click

from shopql.infrastructure.bootstrap import DATA_DIR_ENV
from shopql.infrastructure.cli.cart_commands import (
    cart_add,
    cart_create,
    cart_delete,
    cart_remove,
    cart_show,
)
from shopql.infrastructure.cli.graphql_commands import query, schema_sdl
from shopql.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default="data",
    show_default=True,
    envvar=DATA_DIR_ENV,
    help="Directory holding the products/ and carts/ stores.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """shopql — products and carts over GraphQL"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = data_dir


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def cart() -> None:
    """Manage carts."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
cart.add_command(cart_add)
cart.add_command(cart_create)
cart.add_command(cart_delete)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cli.add_command(query)
cli.add_command(schema_sdl)
