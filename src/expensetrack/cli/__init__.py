"""Command-line interface for expensetrack."""
