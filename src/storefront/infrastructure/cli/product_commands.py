"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.list_products import ListProductsHandler, ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cookie_jar, product_repository, session_gate


@click.command("list")
@click.option("--featured", is_flag=True, default=False, help="Only the newest products.")
def product_list(featured: bool) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        products = handler.featured() if featured else handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<14} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 60)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<14} {str(p.price):>10} {p.stock:>6}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{p.name}  (#{p.id})")
    click.echo(f"Price:    {p.price}")
    click.echo(f"Category: {p.category}")
    click.echo(f"Stock:    {p.stock}")
    if p.image:
        click.echo(f"Image:    {p.image}")
    if p.description:
        click.echo()
        click.echo(p.description)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, help="Category.")
@click.option("--stock", default=0, show_default=True, type=int, help="Units in stock.")
@click.option("--description", default="", help="Description.")
@click.option("--image", default="", help="Image path or URL.")
def product_add(
    name: str, price: str, category: str, stock: int, description: str, image: str
) -> None:
    """Add a new product to the catalog (admin only)."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        session_gate().require_admin(cookie_jar().cookies())
        product = handler.handle(
            name=name,
            price=price,
            category=category,
            stock=stock,
            description=description,
            image=image,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
def product_update(product_id: str, price: str | None, stock: int | None) -> None:
    """Update a product's price or stock (admin only)."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        session_gate().require_admin(cookie_jar().cookies())
        product = handler.handle(product_id=product_id, new_price=price, new_stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated: {product.price}, {product.stock} in stock")
