#!/usr/bin/env python3
"""
LinkedIn Connections CLI

Reads a LinkedIn "Connections.csv" export and prints the connection count and
the companies most of your network works at, or the full list as JSON.

Usage:
    python scripts/parse_linkedin.py Connections.csv
    python scripts/parse_linkedin.py Connections.csv --top 25
    python scripts/parse_linkedin.py Connections.csv --json > connections.json
"""

import json
from pathlib import Path

import typer
from typing_extensions import Annotated

from cipher.contexts.network import (
    company_breakdown,
    decode_csv_bytes,
    parse_linkedin_connections,
)
from cipher.contexts.network.logger import setup_network_logger
from cipher.utils.logger import session_log_dir

app = typer.Typer(
    help="Summarize a LinkedIn connections export",
    add_completion=False,
)


@app.command()
def main(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="LinkedIn Connections.csv export",
            exists=True,
            file_okay=True,
            dir_okay=False,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print every connection as JSON instead of a summary",
        ),
    ] = False,
    top: Annotated[
        int,
        typer.Option(
            "--top",
            "-n",
            help="Number of companies to list in the summary",
            min=1,
        ),
    ] = 10,
):
    """
    Parse a connections export.

    Examples:\n

        $ parse_linkedin.py Connections.csv

        $ parse_linkedin.py Connections.csv --json
    """
    setup_network_logger(session_log_dir("parse_linkedin"), source=input_file.name)

    connections = parse_linkedin_connections(decode_csv_bytes(input_file.read_bytes()))

    if as_json:
        typer.echo(json.dumps([conn.to_dict() for conn in connections], indent=2))
        return

    typer.secho(f"\nConnections: {len(connections)}", fg=typer.colors.BLUE, bold=True)

    breakdown = company_breakdown(connections, top=top)
    if not breakdown:
        typer.echo("  No company information found")
        return

    typer.echo(f"\n=== Top {len(breakdown)} companies ===")
    width = max(len(company) for company, _ in breakdown)
    for company, count in breakdown:
        typer.echo(f"  {company:<{width}}  {count}")


if __name__ == "__main__":
    app()
