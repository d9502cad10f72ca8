#!/usr/bin/env python3
"""
Analyze a job description and preview the auto-filled job posting form.

Usage:
    python scripts/analyze_job.py data/jds/frontend_intern.txt
    python scripts/analyze_job.py jd.txt --set location=Pune --set skills="React, Redux"
    python scripts/analyze_job.py jd.txt --submit
    python scripts/analyze_job.py jd.txt --simulate-latency --config configs/jdfill.yaml
"""

import json
import random
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from jdfill.contexts.extraction.extractor import extract_job_fields
from jdfill.contexts.extraction.latency import with_configured_latency
from jdfill.contexts.extraction.logger import setup_extraction_logger
from jdfill.contexts.form.exceptions import (
    DocumentRejectedError,
    UpstreamError,
    ValidationError,
)
from jdfill.contexts.form.form_state import FORM_FIELDS, JobForm
from jdfill.contexts.form.submission import RecordingJobService, submit_job
from jdfill.utils.config import load_config

load_dotenv()

app = typer.Typer(help="Analyze a job description and preview the job posting form.")

PROVENANCE_MARKERS = {
    "unset": " ",
    "ai-suggested": "*",
    "user-confirmed": "+",
}


def parse_edit(raw: str) -> tuple[str, object]:
    """Split a --set FIELD=VALUE argument; skills are comma-separated."""
    if "=" not in raw:
        raise typer.BadParameter(f"Expected FIELD=VALUE, got: {raw}")
    field_name, value = raw.split("=", 1)
    field_name = field_name.strip()
    if field_name not in FORM_FIELDS:
        raise typer.BadParameter(
            f"Unknown field '{field_name}' (choose from: {', '.join(FORM_FIELDS)})"
        )
    if field_name == "skills":
        return field_name, [s.strip() for s in value.split(",") if s.strip()]
    return field_name, value.strip()


def print_form(form: JobForm) -> None:
    typer.echo("\n=== Job Posting Form ===")
    for name, entry in form.snapshot().items():
        marker = PROVENANCE_MARKERS[entry["provenance"]]
        value = entry["value"]
        if isinstance(value, list):
            value = ", ".join(value)
        display = value if value not in (None, "") else "(empty)"
        typer.echo(f" {marker} {name:<9} {display}")
    typer.echo("\n  * AI suggested   + confirmed by you")


@app.command()
def main(
    jd_file: Path = typer.Argument(..., exists=True, readable=True, help="Job description text file"),
    edits: Optional[List[str]] = typer.Option(
        None, "--set", help="User edit as FIELD=VALUE (repeatable)"
    ),
    submit: bool = typer.Option(False, "--submit", help="Dry-run submission and print the payload"),
    simulate_latency: bool = typer.Option(
        False, "--simulate-latency", help="Delay analysis like the interactive tool"
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML config override"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for placeholder coordinates"),
):
    """Extract job fields, apply edits, and optionally dry-run the submission."""
    config = load_config(config_path)
    log_dir = Path(config.logging.log_dir) / f"analyze_{datetime.now():%Y%m%d_%H%M%S}"
    log_file = setup_extraction_logger(
        log_dir, document_name=jd_file.name, console_level=config.logging.console_level
    )
    typer.echo(f"Log file: {log_file}")

    form = JobForm(config=config)
    form.set_document(jd_file.read_text())

    extractor = with_configured_latency(extract_job_fields, config, enabled=simulate_latency or None)
    try:
        form.analyze(extractor=extractor)
    except DocumentRejectedError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    for raw in edits or []:
        field_name, value = parse_edit(raw)
        form.user_edit(field_name, value)

    print_form(form)

    if not submit:
        return

    service = RecordingJobService()
    rng = random.Random(seed) if seed is not None else None
    try:
        job_id = submit_job(form, service, rng=rng)
    except ValidationError as e:
        typer.echo(f"\nERROR: {e}", err=True)
        raise typer.Exit(1)
    except UpstreamError as e:
        typer.echo(f"\nERROR: {e.message}", err=True)
        raise typer.Exit(1)

    typer.echo(f"\n=== Payload ({job_id}, dry run) ===")
    typer.echo(json.dumps(service.created[job_id], indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
