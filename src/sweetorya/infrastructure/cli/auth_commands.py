"""CLI commands for logging in and out."""

from __future__ import annotations

import click

from sweetorya.application.login import LoginHandler, LogoutHandler
from sweetorya.domain.exceptions import DomainException
from sweetorya.infrastructure.bootstrap import Container


@click.command("login")
@click.option("--username", prompt=True, help="Admin username.")
@click.option("--password", prompt=True, hide_input=True, help="Admin password.")
@click.pass_obj
def login(container: Container, username: str, password: str) -> None:
    """Log in and store the access token."""
    try:
        handler = LoginHandler(
            auth_repo=container.auth_repository(),
            session_repo=container.session_repository(),
        )
        session = handler.handle(username, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Logged in as {session.current_user}.")


@click.command("logout")
@click.pass_obj
def logout(container: Container) -> None:
    """Forget the stored access token."""
    LogoutHandler(container.session_repository()).handle()
    click.echo("Logged out.")


@click.command("whoami")
@click.pass_obj
def whoami(container: Container) -> None:
    """Show who is logged in."""
    session = container.session()
    if not session.is_authenticated:
        raise click.ClickException("Not logged in.")
    click.echo(session.current_user or "(unknown user)")
