"""Monthly dashboard command."""

import click

from expensetrack.cli.commands.expense import format_amount
from expensetrack.cli.periods import month_options, resolve_year_month
from expensetrack.cli.session import require_user
from expensetrack.domain.alerts import AlertGenerator
from expensetrack.domain.dashboard import DashboardService
from expensetrack.domain.entities import AlertType, CategoryAmount
from expensetrack.domain.summary import MonthlySummaryService

BAR_WIDTH = 30


def print_category_table(title: str, rows: dict[str, CategoryAmount]) -> None:
    click.echo(f"\n{title}:")
    if not rows:
        click.echo("  (no expenses)")
        return
    for category, entry in rows.items():
        bar = "#" * round(entry.percentage * BAR_WIDTH / 100)
        click.echo(
            f"  {category:<16} {format_amount(entry.value):>14} "
            f"{entry.percentage:>4}% {bar}"
        )


@click.command("dashboard")
@month_options
@click.pass_context
def dashboard(ctx, year: int | None, month: int | None):
    """Show totals, averages and budget alerts for a month."""
    user = require_user(ctx)
    db = ctx.obj["db"]
    year, month = resolve_year_month(year, month)

    service = DashboardService(
        db,
        MonthlySummaryService(db),
        AlertGenerator(db, ctx.obj["settings"].category_budgets),
    )
    result = service.build(user, year, month)

    click.echo(f"\nDashboard for {user.username}, {year}-{month:02d}")
    click.echo("=" * 60)
    for alert in result.alerts:
        label = "WARNING" if alert.type is AlertType.WARNING else "OK"
        click.echo(f"[{label}] {alert.message}")

    click.echo(f"\nTotal spent: {format_amount(result.total_expenditure)}")
    print_category_table("Totals by category (share of month)", result.category_totals)
    print_category_table(
        "Average expense by category (relative to highest)", result.category_averages
    )
    click.echo(
        "\nYears with expenses: "
        + ", ".join(str(y) for y in result.available_years)
    )


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
