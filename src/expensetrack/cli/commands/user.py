"""User registration and login commands."""

import click

from expensetrack.cli.error_handling import handle_domain_error
from expensetrack.cli.session import require_user
from expensetrack.domain.auth import AuthService
from expensetrack.domain.errors import DomainError


@click.command("register")
@click.argument("username")
@click.password_option(help="Password (at least 8 characters, one digit)")
@click.pass_context
def register(ctx, username: str, password: str):
    """Create a new user account."""
    service = AuthService(ctx.obj["db"])

    # click.password_option already asked for the confirmation
    try:
        identity = service.register(username, password, password)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Registered user '{identity.username}' (ID: {identity.id})")


@click.command("login")
@click.argument("username")
@click.option("--password", prompt=True, hide_input=True, help="Password")
@click.pass_context
def login(ctx, username: str, password: str):
    """Log in and remember the user for later commands."""
    service = AuthService(ctx.obj["db"])

    try:
        identity = service.authenticate(username, password)
    except DomainError as e:
        handle_domain_error(ctx, e)

    ctx.obj["session"].save(identity)
    click.echo(f"Logged in as '{identity.username}'")


@click.command("logout")
@click.pass_context
def logout(ctx):
    """Forget the logged-in user."""
    if ctx.obj["session"].clear():
        click.echo("Logged out.")
    else:
        click.echo("Not logged in.")


@click.command("whoami")
@click.pass_context
def whoami(ctx):
    """Show the logged-in user."""
    identity = require_user(ctx)
    click.echo(f"{identity.username} (ID: {identity.id})")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(register)
    cli.add_command(login)
    cli.add_command(logout)
    cli.add_command(whoami)
