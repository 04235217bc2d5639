"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from shopql.application.add_product import AddProductHandler
from shopql.application.delete_product import DeleteProductHandler
from shopql.application.get_product import GetProductHandler
from shopql.application.list_products import ListProductsHandler
from shopql.domain.exceptions import DomainException
from shopql.infrastructure.bootstrap import ShopContext
from shopql.infrastructure.cli.context import pass_shop_context


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--id", "product_id", default=None, help="Product ID (random UUID if omitted).")
@pass_shop_context
def product_add(ctx: ShopContext, name: str, price: str, product_id: str | None) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=ctx.product_repo)

    try:
        dto = handler.handle(name=name, price=price, product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' added at {dto.price}")


@click.command("list")
@pass_shop_context
def product_list(ctx: ShopContext) -> None:
    """List all products in the catalog."""
    try:
        products = ListProductsHandler(ctx.product_repo).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Price':>10}")
    click.echo("-" * 70)
    for p in products:
        click.echo(f"{p.id:<38} {p.name:<20} {p.price:>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_shop_context
def product_show(ctx: ShopContext, product_id: str) -> None:
    """Show a single product."""
    try:
        dto = GetProductHandler(ctx.product_repo).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id}")
    click.echo(f"Name:  {dto.name}")
    click.echo(f"Price: {dto.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_shop_context
def product_delete(ctx: ShopContext, product_id: str) -> None:
    """Delete a product from the catalog."""
    try:
        result = DeleteProductHandler(ctx.product_repo).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.success:
        raise click.ClickException(f"Product {product_id} could not be deleted")
    click.echo(f"Product {result.deleted_id} deleted.")
