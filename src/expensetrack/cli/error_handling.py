"""CLI error handling helpers."""

import click

from expensetrack.domain.errors import DomainError, ValidationError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    if isinstance(error, ValidationError) and error.field_errors:
        click.echo("Error:", err=True)
        for field_name, reason in error.field_errors.items():
            click.echo(f"  {field_name}: {reason}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
