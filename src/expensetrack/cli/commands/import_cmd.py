"""CSV import command."""

import click

from expensetrack.cli.error_handling import handle_domain_error
from expensetrack.cli.session import require_user
from expensetrack.domain.csv_import import CSVImportService
from expensetrack.domain.errors import DomainError
from expensetrack.domain.uploads import LocalUploadedFile


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_csv(ctx, csv_file: str):
    """Import expenses from a CSV file.

    Each line holds date, amount, description and category, e.g.:

        2025-01-02,12.30,Milk,groceries

    Skipped lines are reported in the log (use --verbose to see them).
    """
    user = require_user(ctx)
    service = CSVImportService(
        ctx.obj["db"], categories=ctx.obj["settings"].categories
    )

    try:
        result = service.import_csv(user, LocalUploadedFile(csv_file))
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {result.imported_count} expenses")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
