"""CLI commands for the shopping cart.

Every command resolves the cart source from the cookie jar first:
logged-in visitors work on the cart stored with their account,
anonymous visitors on the ``cart`` cookie.
"""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO, CartUpdate
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_engine,
    cookie_jar,
    product_repository,
    session_gate,
)


def _display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Items':<27} {dto.count:>27}")
    click.echo(f"  {'Cart Total':<27} {dto.total:>27}")


def _apply(update: CartUpdate) -> None:
    cookie_jar().apply(update.cookie)


@click.command("show")
def cart_show() -> None:
    """Show the cart with current prices."""
    try:
        source = session_gate().resolve_cart_source(cookie_jar().cookies())
        dto = ShowCartHandler(cart_engine(), product_repository()).handle(source)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def cart_add(product_id: str, quantity: int) -> None:
    """Add a product to the cart."""
    try:
        source = session_gate().resolve_cart_source(cookie_jar().cookies())
        update = cart_engine().add_item(source, product_id, quantity)
        _apply(update)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product added to cart. Cart: {update.count} item(s), {update.total}")


@click.command("update")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (at least 1).")
def cart_update(product_id: str, quantity: int) -> None:
    """Set the quantity of a product already in the cart."""
    try:
        source = session_gate().resolve_cart_source(cookie_jar().cookies())
        update = cart_engine().update_quantity(source, product_id, quantity)
        _apply(update)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart updated. Total: {update.total}")


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    try:
        source = session_gate().resolve_cart_source(cookie_jar().cookies())
        update = cart_engine().remove_item(source, product_id)
        _apply(update)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product removed from cart. Cart: {update.count} item(s), {update.total}")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    try:
        source = session_gate().resolve_cart_source(cookie_jar().cookies())
        _apply(cart_engine().clear(source))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Cart cleared.")


@click.command("count")
def cart_count() -> None:
    """Print the number of units in the cart."""
    try:
        engine = cart_engine()
        source = session_gate().resolve_cart_source(cookie_jar().cookies())
        count = engine.get_count(engine.load(source))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(str(count))
