#!/usr/bin/env python3
"""
Resume Parsing CLI

Extracts a resume's text (or takes pasted text) and prints the structured
profile, skills, warnings, and section map as JSON.

Usage:
    python scripts/parse_resume.py resume.pdf
    python scripts/parse_resume.py resume.docx --policy section_only
    python scripts/parse_resume.py --text "$(pbpaste)" --output profile.json
"""

import json
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from cipher.contexts.extraction import RawDocument, extract_text
from cipher.contexts.intake import SkillPolicy, parse_resume
from cipher.contexts.intake.logger import setup_intake_logger
from cipher.utils.config import get_setting, load_config
from cipher.utils.logger import session_log_dir

app = typer.Typer(
    help="Parse a resume into a structured profile and skill list",
    add_completion=False,
)


@app.command()
def main(
    input_file: Annotated[
        Optional[Path],
        typer.Argument(
            help="Resume document (PDF, DOCX, DOC, or plain text)",
            exists=True,
            file_okay=True,
            dir_okay=False,
        ),
    ] = None,
    text: Annotated[
        Optional[str],
        typer.Option(
            "--text",
            "-t",
            help="Resume text to parse instead of a file",
        ),
    ] = None,
    policy: Annotated[
        Optional[str],
        typer.Option(
            "--policy",
            "-p",
            help="Skill policy: keywords or section_only (default from config)",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write JSON to this file instead of stdout",
        ),
    ] = None,
):
    """
    Parse one resume and emit JSON.

    Examples:\n

        $ parse_resume.py resume.pdf

        $ parse_resume.py --text "Jane Doe ..." --policy section_only
    """
    if input_file is None and text is None:
        raise typer.BadParameter("Provide a resume file or --text")

    config = load_config()
    if policy is None:
        policy = get_setting(config, "skills.inference_policy")
    try:
        policy = SkillPolicy.from_value(policy)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    source = input_file.name if input_file else "<text>"
    setup_intake_logger(session_log_dir("parse_resume"), source=source)

    warnings = []
    if text is None:
        if input_file.suffix.lower() in (".txt", ".md"):
            text = input_file.read_text(encoding="utf-8", errors="replace")
        else:
            extracted = extract_text(
                RawDocument(data=input_file.read_bytes(), filename=source),
                use_layout_engine=get_setting(config, "pdf.use_layout_engine"),
            )
            text = extracted.text
            warnings.extend(extracted.warnings)

    result = parse_resume(
        text,
        skill_policy=policy,
        header_scan_lines=get_setting(config, "resume.header_scan_lines"),
        education_lines=get_setting(config, "resume.education_lines"),
        certification_lines=get_setting(config, "resume.certification_lines"),
        short_text_threshold=get_setting(config, "resume.short_text_threshold"),
    )
    payload = result.to_dict()
    payload["warnings"] = warnings + payload["warnings"]
    rendered = json.dumps(payload, indent=2)

    if output:
        output.write_text(rendered + "\n", encoding="utf-8")
        typer.secho(f"✓ Profile written to {output}", fg=typer.colors.GREEN)
    else:
        typer.echo(rendered)


if __name__ == "__main__":
    app()
