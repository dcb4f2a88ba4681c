import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.auth_commands import (
    auth_login,
    auth_logout,
    auth_register,
    auth_whoami,
    user_grant_admin,
)
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_count,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.order_commands import (
    order_checkout,
    order_list,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
    product_update,
)
from storefront.utils.logging import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log to stderr at INFO level.")
def cli(verbose: bool) -> None:
    """Storefront: catalog, cart and checkout."""
    configure_logging("INFO" if verbose else settings().log_level)


@cli.group()
def auth() -> None:
    """Register, log in and out."""


@cli.group()
def user() -> None:
    """Administer user accounts."""


@cli.group()
def product() -> None:
    """Browse and manage the catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def order() -> None:
    """Check out and view orders."""


# Register subcommands
auth.add_command(auth_login)
auth.add_command(auth_logout)
auth.add_command(auth_register)
auth.add_command(auth_whoami)
user.add_command(user_grant_admin)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_count)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_checkout)
order.add_command(order_list)
order.add_command(order_show)
