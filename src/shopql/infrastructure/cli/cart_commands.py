"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from shopql.application.add_product_to_cart import AddProductToCartHandler
from shopql.application.create_cart import CreateCartHandler
from shopql.application.delete_cart import DeleteCartHandler
from shopql.application.dto import CartDTO
from shopql.application.get_cart import GetCartHandler
from shopql.application.remove_product_from_cart import (
    RemoveProductFromCartHandler,
)
from shopql.domain.exceptions import DomainException
from shopql.infrastructure.bootstrap import ShopContext
from shopql.infrastructure.cli.context import pass_shop_context


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a cart."""
    click.echo(f"Cart {dto.id}")
    click.echo()

    if not dto.items:
        click.echo("  (empty)")
    else:
        click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10}")
        click.echo(f"  {'-'*37}")
        for item in dto.items:
            click.echo(f"  {item.name:<20} {item.quantity:>5} {item.price:>10}")
        click.echo(f"  {'-'*37}")

    click.echo(f"  {'Total':<26} {dto.total_sum:>10}")


@click.command("create")
@pass_shop_context
def cart_create(ctx: ShopContext) -> None:
    """Create a new, empty cart."""
    dto = CreateCartHandler(ctx.cart_repo).handle()
    click.echo(f"Cart {dto.id} created.")


@click.command("show")
@click.option("--id", "cart_id", required=True, help="Cart ID to display.")
@pass_shop_context
def cart_show(ctx: ShopContext, cart_id: str) -> None:
    """Show the contents of a cart."""
    try:
        dto = GetCartHandler(ctx.cart_repo).handle(cart_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("add")
@click.option("--id", "cart_id", required=True, help="Cart ID.")
@click.option("--product", "product_id", required=True, help="Product ID to add.")
@pass_shop_context
def cart_add(ctx: ShopContext, cart_id: str, product_id: str) -> None:
    """Add one unit of a product to a cart."""
    handler = AddProductToCartHandler(
        cart_repo=ctx.cart_repo,
        product_repo=ctx.product_repo,
    )

    try:
        dto = handler.handle(cart_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@click.option("--id", "cart_id", required=True, help="Cart ID.")
@click.option("--item", "cart_item_id", required=True, help="Cart item (product) ID.")
@pass_shop_context
def cart_remove(ctx: ShopContext, cart_id: str, cart_item_id: str) -> None:
    """Remove one unit of an item from a cart."""
    try:
        dto = RemoveProductFromCartHandler(ctx.cart_repo).handle(cart_id, cart_item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("delete")
@click.option("--id", "cart_id", required=True, help="Cart ID to delete.")
@pass_shop_context
def cart_delete(ctx: ShopContext, cart_id: str) -> None:
    """Delete a cart."""
    try:
        result = DeleteCartHandler(ctx.cart_repo).handle(cart_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.success:
        raise click.ClickException(f"Cart {cart_id} could not be deleted")
    click.echo(f"Cart {result.deleted_id} deleted.")
