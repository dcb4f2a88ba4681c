"""CLI commands for checkout and the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import OrderDTO, ShippingInfo
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import CartClearPendingError, DomainException
from storefront.domain.model.order import PaymentMethod
from storefront.infrastructure.bootstrap import (
    cart_engine,
    cookie_jar,
    order_repository,
    product_repository,
    session_gate,
)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.reference}")
    click.echo(f"Placed:   {dto.created_at}")
    click.echo(f"Ship to:  {dto.shipping_address}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("checkout")
@click.option("--street", required=True, help="Street address.")
@click.option("--city", required=True, help="City.")
@click.option("--state", required=True, help="State or region.")
@click.option("--zip", "zip_code", required=True, help="ZIP / postal code.")
@click.option("--country", required=True, help="Country.")
@click.option(
    "--payment",
    "payment_method",
    required=True,
    type=click.Choice([m.value for m in PaymentMethod]),
    help="Payment method.",
)
def order_checkout(
    street: str, city: str, state: str, zip_code: str, country: str, payment_method: str
) -> None:
    """Place an order for everything in the cart (login required)."""
    jar = cookie_jar()
    gate = session_gate()
    handler = CheckoutHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        cart_engine=cart_engine(),
    )

    try:
        user = gate.require_user(jar.cookies())
        result = handler.handle(
            source=gate.resolve_cart_source(jar.cookies()),
            owner_id=user.id,  # type: ignore[arg-type]
            shipping=ShippingInfo(
                street=street, city=city, state=state, zip_code=zip_code, country=country
            ),
            payment_method=payment_method,
        )
        jar.apply(result.cookie)
    except CartClearPendingError as exc:
        raise click.ClickException(f"{exc} Run 'storefront cart clear' to finish.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {result.order.reference} placed (id={result.order.id}).")
    click.echo()
    _display_order(result.order)


@click.command("list")
def order_list() -> None:
    """List your orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        user = session_gate().require_user(cookie_jar().cookies())
        orders = handler.handle(user.id)  # type: ignore[arg-type]
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders yet.")
        return

    click.echo(f"{'ID':<6} {'Reference':<10} {'Placed':<22} {'Total':>10}")
    click.echo("-" * 51)
    for dto in orders:
        click.echo(f"{dto.id:<6} {dto.reference:<10} {dto.created_at:<22} {dto.total:>10}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of one of your orders."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        user = session_gate().require_user(cookie_jar().cookies())
        dto = handler.handle(order_id, viewer=user)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
