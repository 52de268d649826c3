"""CLI command for one-off LPSN lookups.

Usage:
    lpsn-search Escherichia
    lpsn-search "Escherichia coli" --indent 0
"""

import asyncio
import json
import sys

import click

from lpsnapi.config import ConfigManager
from lpsnapi.species.errors import LPSNError
from lpsnapi.species.lpsn_client import LPSNClient
from lpsnapi.system.structlog_configurator import configure_structlog


@click.command()
@click.argument("word")
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="JSON indentation (0 prints a single line)",
)
def search_species(word: str, indent: int) -> None:
    """Search LPSN for WORD and print the matching species records as JSON."""
    config = ConfigManager().load()
    configure_structlog(config)

    client = LPSNClient(config)
    try:
        records = asyncio.run(client.list_bacteria(word))
    except LPSNError as e:
        click.echo(click.style(f"✗ LPSN lookup failed: {e}", fg="red"), err=True)
        sys.exit(1)

    payload = [record.model_dump(exclude_none=True) for record in records]
    click.echo(json.dumps(payload, indent=indent or None, ensure_ascii=False))


def main() -> None:
    """Entry point for the CLI."""
    search_species()


if __name__ == "__main__":
    main()
