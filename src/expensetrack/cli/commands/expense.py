"""Expense management commands."""

from datetime import date

import click

from expensetrack.cli.error_handling import handle_domain_error
from expensetrack.cli.periods import month_options, resolve_year_month
from expensetrack.cli.session import require_user
from expensetrack.domain.entities import Expense
from expensetrack.domain.errors import DomainError
from expensetrack.domain.expense import ExpenseService

PAGE_SIZE = 20


def format_amount(amount) -> str:
    return f"{amount:,.2f} €"


def expense_service(ctx) -> ExpenseService:
    return ExpenseService(ctx.obj["db"], categories=ctx.obj["settings"].categories)


def print_expense(expense: Expense) -> None:
    click.echo(f"  Date: {expense.date}")
    click.echo(f"  Category: {expense.category}")
    click.echo(f"  Amount: {format_amount(expense.amount)}")
    click.echo(f"  Description: {expense.description}")


@click.group()
def expense_group():
    """Manage expenses."""
    pass


@expense_group.command("add")
@click.option(
    "--date",
    "date_str",
    default=lambda: date.today().isoformat(),
    help="Expense date (YYYY-MM-DD or 'today', 'yesterday'; default: today)",
)
@click.option("--amount", required=True, help="Amount (e.g., 12.30)")
@click.option("--description", required=True, help="What the money was spent on")
@click.option("--category", required=True, help="Category name (see 'category list')")
@click.pass_context
def add_expense(ctx, date_str: str, amount: str, description: str, category: str):
    """Record an expense.

    Examples:
        expensetrack expense add --amount 12.30 --description "Milk" --category groceries
    """
    user = require_user(ctx)
    service = expense_service(ctx)

    try:
        expense = service.create(
            user=user,
            amount=amount,
            description=description,
            date=date_str,
            category=category,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created expense {expense.id}")
    print_expense(expense)


@expense_group.command("list")
@month_options
@click.option("--page", type=int, default=1, help="Page number")
@click.pass_context
def list_expenses(ctx, year: int | None, month: int | None, page: int):
    """List expenses of a month, newest first."""
    user = require_user(ctx)
    service = expense_service(ctx)
    year, month = resolve_year_month(year, month)

    available_years = service.list_expenditure_years(user)
    if available_years and year not in available_years:
        click.echo(f"No expenses in {year}, showing {available_years[0]} instead.")
        year = available_years[0]

    result = service.paginate(user, year, month, page, PAGE_SIZE)
    if result.total == 0:
        click.echo(f"No expenses found for {year}-{month:02d}.")
        return

    click.echo(f"\nExpenses for {year}-{month:02d}:")
    click.echo("-" * 90)
    click.echo(f"{'ID':<6} {'Date':<12} {'Category':<16} {'Amount':>14}  {'Description':<40}")
    click.echo("-" * 90)
    for expense in result.expenses:
        click.echo(
            f"{expense.id:<6} {str(expense.date):<12} {expense.category:<16} "
            f"{format_amount(expense.amount):>14}  {expense.description[:40]:<40}"
        )
    click.echo("-" * 90)
    click.echo(
        f"Page {result.page} of {result.total_pages} ({result.total} expenses)"
    )


@expense_group.command("edit")
@click.argument("expense_id", type=int)
@click.option("--date", "date_str", help="New date")
@click.option("--amount", help="New amount")
@click.option("--description", help="New description")
@click.option("--category", help="New category")
@click.pass_context
def edit_expense(
    ctx,
    expense_id: int,
    date_str: str | None,
    amount: str | None,
    description: str | None,
    category: str | None,
):
    """Edit an expense. Options left out keep their current value."""
    user = require_user(ctx)
    service = expense_service(ctx)

    try:
        current = service.get_owned_expense(user, expense_id)
        expense = service.update(
            user=user,
            expense_id=expense_id,
            amount=amount if amount is not None else current.amount,
            description=description if description is not None else current.description,
            date=date_str if date_str is not None else current.date,
            category=category if category is not None else current.category,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated expense {expense.id}")
    print_expense(expense)


@expense_group.command("delete")
@click.argument("expense_id", type=int)
@click.confirmation_option(prompt="Are you sure you want to delete this expense?")
@click.pass_context
def delete_expense(ctx, expense_id: int):
    """Delete an expense."""
    user = require_user(ctx)
    service = expense_service(ctx)

    try:
        service.delete(user, expense_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted expense {expense_id}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
