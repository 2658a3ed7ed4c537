"""CLI commands for printing invoice statements."""

from __future__ import annotations

import json

import click

from theater.application.print_statement import PrintStatementHandler
from theater.domain.exceptions import DomainException
from theater.infrastructure.bootstrap import (
    invoice_repository,
    play_repository,
    pricing_rules,
)


@click.command("statement")
@click.option("--invoice", "invoice_id", required=True, type=int, help="Invoice ID to bill.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
def statement_print(invoice_id: int, output_format: str) -> None:
    """Print the billing statement for an invoice."""
    try:
        handler = PrintStatementHandler(
            invoice_repo=invoice_repository(),
            play_repo=play_repository(),
            rules=pricing_rules(),
        )
        dto = handler.handle(invoice_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if output_format == "json":
        click.echo(json.dumps(dto.to_dict(), indent=2))
    else:
        click.echo(dto.text, nl=False)


@click.command("invoices")
def invoice_list() -> None:
    """List invoices available for billing."""
    repo = invoice_repository()
    try:
        ids = repo.list_ids()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not ids:
        click.echo("No invoices found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Performances':>12}")
    click.echo("-" * 40)
    for invoice_id in ids:
        try:
            invoice = repo.get_by_id(invoice_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))
        click.echo(f"{invoice_id:<6} {invoice.customer:<20} {len(invoice.performances):>12}")
