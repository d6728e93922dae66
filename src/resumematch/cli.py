"""Typer CLI entrypoint for the match pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigManager
from .container import create_container
from .core import InvalidProfile, ScoringWeights
from .extraction import ExtractionError, HTTPProfileExtractor
from .logging import configure_logging
from .pdf_utils import DocumentIngestionError
from .pipeline import AuditLogger, ProfileLoadError

app = typer.Typer(help="Resume to job description match scoring CLI.")


def _load_settings(config: Path | None) -> dict[str, Any]:
    if config is None:
        return {}
    try:
        settings = ConfigManager.settings_from_file(config)
        ScoringWeights.from_settings(settings)
    except (yaml.YAMLError, ValidationError, ValueError, TypeError) as exc:
        raise typer.BadParameter(f"Invalid config file: {exc}", param_hint="config") from exc
    return settings


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command()
def score(
    job: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job profile JSON path (or combined job/resume document)."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    resume: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Resume profile JSON path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML weighting config (.yaml)."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Score structured job and resume profiles."""
    settings = _load_settings(config)
    configure_logging(log_level)

    pipeline = create_container(settings=settings).pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    try:
        payload = pipeline.run(
            job_path=job,
            resume_path=resume,
            output_path=output,
            audit_logger=audit_logger,
        )
    except (InvalidProfile, ProfileLoadError) as exc:
        _fail(exc)

    match = payload["result"]["match"]
    typer.echo(
        f"{match['decision']} (score {match['overallScore']}, confidence {match['confidence']}). "
        f"Result saved to {output}."
    )


@app.command()
def match(
    job_pdf: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job description PDF."),
    resume_pdf: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Resume PDF."),
    extractor_endpoint: str = typer.Option(..., help="Profile extraction API endpoint."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    extractor_api_key: Optional[str] = typer.Option(None, envvar="RESUMEMATCH_EXTRACTOR_API_KEY", help="Extraction API key."),
    extractor_timeout: float = typer.Option(30.0, help="Extraction request timeout in seconds."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML weighting config (.yaml)."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Ingest PDFs, extract profiles remotely, then score them."""
    settings = _load_settings(config)
    configure_logging(log_level)

    pipeline = create_container(settings=settings).pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None
    extractor = HTTPProfileExtractor(
        extractor_endpoint,
        extractor_api_key,
        timeout=extractor_timeout,
    )

    try:
        payload = pipeline.run_documents(
            job_document=job_pdf,
            resume_document=resume_pdf,
            extractor=extractor,
            output_path=output,
            audit_logger=audit_logger,
        )
    except (DocumentIngestionError, ExtractionError, InvalidProfile) as exc:
        _fail(exc)

    result = payload["result"]["match"]
    typer.echo(
        f"{result['decision']} (score {result['overallScore']}, confidence {result['confidence']}). "
        f"Result saved to {output}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
