#!/usr/bin/env python3
"""
Document Text Extraction CLI

Recovers plain text from a resume or export (PDF, DOCX, legacy DOC, CSV) and
prints it along with any extraction warnings.

Usage:
    python scripts/extract_text.py resume.pdf
    python scripts/extract_text.py resume.pdf --no-layout        # literal Tj/TJ scanner only
    python scripts/extract_text.py resume.docx --output resume.txt
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from cipher.contexts.extraction import RawDocument, extract_text
from cipher.contexts.extraction.logger import setup_extraction_logger
from cipher.utils.config import get_setting, load_config
from cipher.utils.logger import session_log_dir

app = typer.Typer(
    help="Extract plain text from PDF, DOCX, DOC, or CSV files",
    add_completion=False,
)


@app.command()
def main(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Document to extract text from",
            exists=True,
            file_okay=True,
            dir_okay=False,
        ),
    ],
    no_layout: Annotated[
        bool,
        typer.Option(
            "--no-layout",
            help="Skip pdfplumber and use only the literal content-stream scanner",
        ),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write extracted text to this file instead of stdout",
        ),
    ] = None,
):
    """
    Extract text from a single document.

    Examples:\n

        $ extract_text.py resume.pdf

        $ extract_text.py resume.doc -o resume.txt
    """
    config = load_config()
    use_layout_engine = not no_layout and get_setting(config, "pdf.use_layout_engine")

    setup_extraction_logger(session_log_dir("extract"), source=input_file.name)

    document = RawDocument(data=input_file.read_bytes(), filename=input_file.name)
    result = extract_text(document, use_layout_engine=use_layout_engine)

    typer.secho(f"\nKind: {result.kind.value}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Characters: {len(result.text)}")

    if result.warnings:
        typer.echo("\n=== Warnings ===")
        for warning in result.warnings:
            typer.secho(f"  ! {warning}", fg=typer.colors.YELLOW)

    if output:
        output.write_text(result.text, encoding="utf-8")
        typer.secho(f"\n✓ Text written to {output}", fg=typer.colors.GREEN)
    else:
        typer.echo("\n=== Text ===")
        typer.echo(result.text)

    raise typer.Exit(code=0 if result.text else 1)


if __name__ == "__main__":
    app()
