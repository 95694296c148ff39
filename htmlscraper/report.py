"""Rich rendering of scrape errors."""

from rich.console import Console
from rich.table import Table

from htmlscraper.exceptions import AggregateError, ScrapeError


def error_table(error: ScrapeError) -> Table:
    """Build a table with one row per failure.

    Args:
        error: A single ScrapeError or an AggregateError

    Returns:
        Table with Location, Field, Kind and Reason columns.

    """
    errors = error.errors if isinstance(error, AggregateError) else [error]

    table = Table(title='Scrape Errors')
    table.add_column('Location', style='cyan')
    table.add_column('Field', style='magenta')
    table.add_column('Kind', style='bold red')
    table.add_column('Reason')

    for item in errors:
        table.add_row(item.location or '-', item.field or '-', item.kind, item.reason)
    return table


def print_error_report(error: ScrapeError, console: Console | None = None) -> None:
    """Print a summary line and the error table.

    Args:
        error: A single ScrapeError or an AggregateError
        console: Rich console instance. Defaults to None (creates new Console).

    """
    console = console or Console()
    count = len(error) if isinstance(error, AggregateError) else 1
    noun = 'error' if count == 1 else 'errors'
    console.print(f'[bold red]✗ Scrape finished with {count} {noun}[/bold red]')
    console.print(error_table(error))
