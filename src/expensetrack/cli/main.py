"""Main CLI entry point."""

import logging

import click

from expensetrack.config import get_settings
from expensetrack.cli.error_handling import handle_domain_error
from expensetrack.cli.session import SessionStore
from expensetrack.database.factories import create_sqlite_database
from expensetrack.domain.errors import DomainError

# Import and register all commands at module level
from expensetrack.cli.commands import (
    user,
    expense,
    import_cmd,
    dashboard,
    category,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format=LOG_FORMAT)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides EXPENSETRACK_DB_PATH environment variable)",
    envvar="EXPENSETRACK_DB_PATH",
)
@click.option(
    "--session-file",
    type=click.Path(),
    help="Path to the login session file",
    envvar="EXPENSETRACK_SESSION_FILE",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output")
@click.pass_context
def cli(ctx, db_path: str | None, session_file: str | None, verbose: bool):
    """Expensetrack - Personal expense tracking.

    Record expenses, import them from CSV files and compare monthly
    spending against per-category budgets.
    """
    ctx.ensure_object(dict)

    # Initialize settings and database only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            settings = get_settings()
        except DomainError as e:
            handle_domain_error(ctx, e)

        configure_logging("DEBUG" if verbose else settings.log_level)

        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)

        ctx.obj["settings"] = settings
        ctx.obj["db"] = db
        ctx.obj["session"] = SessionStore(session_file or settings.session_file)


# Register all commands
user.register_commands(cli)
expense.register_commands(cli)
import_cmd.register_commands(cli)
dashboard.register_commands(cli)
category.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
