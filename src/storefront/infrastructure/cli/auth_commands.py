"""CLI commands for registration, login and user administration."""

from __future__ import annotations

import click

from storefront.application.grant_admin import GrantAdminHandler
from storefront.application.login_user import LoginHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cookie_jar,
    password_hasher,
    session_gate,
    token_service,
    user_repository,
)


@click.command("register")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Email address (used to log in).")
@click.password_option("--password", help="At least 6 characters.")
def auth_register(name: str, email: str, password: str) -> None:
    """Create an account and log in."""
    handler = RegisterUserHandler(
        user_repo=user_repository(),
        hasher=password_hasher(),
        tokens=token_service(),
    )

    try:
        session = handler.handle(name=name, email=email, password=password)
        cookie_jar().apply(session.cookie)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Welcome, {session.name}! You are logged in as {session.email}.")


@click.command("login")
@click.option("--email", required=True, help="Email address.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Password.")
def auth_login(email: str, password: str) -> None:
    """Log in with email and password."""
    handler = LoginHandler(
        user_repo=user_repository(),
        hasher=password_hasher(),
        tokens=token_service(),
    )

    try:
        session = handler.handle(email=email, password=password)
        cookie_jar().apply(session.cookie)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Logged in as {session.email}.")


@click.command("logout")
def auth_logout() -> None:
    """Log out (the anonymous cart, if any, becomes active again)."""
    try:
        cookie_jar().apply(session_gate().logout())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Logged out.")


@click.command("whoami")
def auth_whoami() -> None:
    """Show who is logged in."""
    try:
        user = session_gate().current_user(cookie_jar().cookies())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if user is None:
        click.echo("Not logged in (anonymous cart).")
        return
    role = " (admin)" if user.is_admin else ""
    click.echo(f"{user.name} <{user.email}>{role}")


@click.command("grant-admin")
@click.option("--email", required=True, help="Email of the user to promote.")
def user_grant_admin(email: str) -> None:
    """Give a user admin rights (catalog management, all orders)."""
    handler = GrantAdminHandler(user_repo=user_repository())

    try:
        user = handler.handle(email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{user.email} is now an admin.")
