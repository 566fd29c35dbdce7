#!/usr/bin/env python3
"""
M-Pesa Statement Importer CLI
"""
import asyncio
import json
import logging
import sys
from decimal import Decimal
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from api.v1.dependencies import (
    get_pdf_extractor,
    get_statement_parser,
    get_transaction_store,
    close_transaction_store,
)
from application.errors import StatementImportError
from application.use_cases.import_statement import ImportStatementUseCase
from domain.exceptions import ExtractionError
from config import settings

console = Console()


@click.group()
@click.version_option(version="1.0.0")
@click.option('--log-level', default=settings.LOG_LEVEL, show_default=True, help='Logging level')
def cli(log_level: str):
    """
    M-Pesa Statement Importer - read Safaricom M-Pesa PDF statements

    Parse statements locally or import them into a user's transactions.
    """
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s [%(name)s] %(message)s")


@cli.command()
@click.argument('pdf_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--password', '-p', default=None, help='PDF password (if protected)')
def text(pdf_file: str, password: Optional[str]):
    """
    Print the row-clustered text of a PDF.

    Example:
        mpesa-import text statement.pdf
    """
    try:
        content = get_pdf_extractor().extract_text(Path(pdf_file).read_bytes(), password)
    except ExtractionError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    click.echo(content)


@cli.command()
@click.argument('pdf_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--password', '-p', default=None, help='PDF password (if protected)')
@click.option('--json', 'as_json', is_flag=True, help='Print transactions as JSON')
def parse(pdf_file: str, password: Optional[str], as_json: bool):
    """
    Parse an M-Pesa statement without saving anything.

    Example:
        mpesa-import parse statement.pdf --password 12345678
    """
    try:
        with console.status("[bold green]Extracting text from PDF..."):
            content = get_pdf_extractor().extract_text(Path(pdf_file).read_bytes(), password)
    except ExtractionError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    transactions = get_statement_parser().parse(content)

    if as_json:
        click.echo(json.dumps([tx.to_dict() for tx in transactions], indent=2))
        return

    if not transactions:
        console.print(Panel("[yellow]No transactions found in the SUMMARY section[/yellow]", style="yellow"))
        return

    table = Table(title="M-Pesa Summary Transactions", show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Description")
    table.add_column("Type", style="magenta")
    table.add_column("Amount", justify="right")

    total_income = Decimal("0.00")
    total_expense = Decimal("0.00")
    for tx in transactions:
        table.add_row(tx.date.isoformat(), tx.description, tx.direction.value, f"{tx.amount:,.2f}")
        if tx.is_income:
            total_income += tx.amount
        else:
            total_expense += tx.amount

    console.print(table)
    console.print(f"Total Income:  [green]{total_income:,.2f} KES[/green]")
    console.print(f"Total Expense: [red]{total_expense:,.2f} KES[/red]")


async def _run_import(content: bytes, filename: str, user_id: str, password: Optional[str]):
    store = await get_transaction_store()
    try:
        use_case = ImportStatementUseCase(
            pdf_extractor=get_pdf_extractor(),
            statement_parser=get_statement_parser(),
            store=store
        )
        return await use_case.execute(content, filename, user_id, password)
    finally:
        await close_transaction_store()


@cli.command(name="import")
@click.argument('pdf_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--user-id', '-u', required=True, help='Owning user identifier')
@click.option('--password', '-p', default=None, help='PDF password (if protected)')
def import_statement(pdf_file: str, user_id: str, password: Optional[str]):
    """
    Import an M-Pesa statement into the configured transaction store.

    Example:
        mpesa-import import statement.pdf --user-id 42
    """
    path = Path(pdf_file)

    try:
        result = asyncio.run(_run_import(path.read_bytes(), path.name, user_id, password))
    except StatementImportError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    table = Table(title="Import Result", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("Total Transactions", str(result.total_parsed))
    table.add_row("Saved", str(result.saved_count))
    table.add_row("Skipped", str(result.skipped_count))
    table.add_row("Total Income", f"{result.total_income:,.2f} KES")
    table.add_row("Total Expense", f"{result.total_expense:,.2f} KES")

    console.print(table)
    console.print(Panel(f"[bold green]✓ {result.message}[/bold green]", style="green"))


if __name__ == '__main__':
    cli()
