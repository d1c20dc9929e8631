"""Category listing command."""

import click


@click.group()
def category_group():
    """Show configured categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List categories and their monthly budgets."""
    budgets = ctx.obj["settings"].category_budgets
    if not budgets:
        click.echo("No categories configured. Set CATEGORY_BUDGETS to a JSON object.")
        return

    click.echo("\nCategories:")
    for name, budget in budgets.items():
        click.echo(f"  {name:<20} budget {budget:,.2f} €")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
