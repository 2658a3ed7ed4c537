import click

from theater.infrastructure.cli.play_commands import play_list
from theater.infrastructure.cli.statement_commands import invoice_list, statement_print
from theater.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log every rendered statement.")
def cli(verbose: bool) -> None:
    """Theater — invoice statements for theatrical performances"""
    configure_logging(verbose)


# Register subcommands
cli.add_command(invoice_list)
cli.add_command(play_list)
cli.add_command(statement_print)
