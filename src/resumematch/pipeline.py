"""Match pipeline assembly and execution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import pendulum
import structlog

from . import __version__
from .core import InvalidProfile, MatchResult, MatchScoringEngine, ProfileNormalizer
from .extraction import ExtractionError, ProfileExtractor
from .pdf_utils import extract_text


class ProfileLoadError(ValueError):
    """Raised when profile documents cannot be loaded."""

    def __init__(self, errors: list[str]):
        super().__init__("Profile loading failed")
        self.errors = errors

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Profile loading failed: {'; '.join(self.errors)}"


class ProfileLoader:
    """Load raw job and resume profile mappings from JSON files."""

    def load_document(self, path: Path) -> dict[str, Any]:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ProfileLoadError([f"{path.name}: invalid JSON ({exc})"]) from exc
            except UnicodeDecodeError as exc:
                raise ProfileLoadError([f"{path.name}: not UTF-8 text ({exc})"]) from exc
        if not isinstance(data, dict):
            raise ProfileLoadError([f"{path.name}: expected a JSON object"])
        return data

    def load_pair(
        self,
        *,
        job_path: Path,
        resume_path: Path | None = None,
    ) -> tuple[dict[str, Any], dict[str, Any]]:
        """Load both profiles from two files, or from one combined document."""
        if resume_path is not None:
            return self.load_document(job_path), self.load_document(resume_path)

        combined = self.load_document(job_path)
        errors = [
            f"{job_path.name}: missing '{key}' object"
            for key in ("job", "resume")
            if not isinstance(combined.get(key), dict)
        ]
        if errors:
            raise ProfileLoadError(errors)
        return combined["job"], combined["resume"]


class OutputWriter:
    """Persist match results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")


class MatchPipeline:
    """End-to-end orchestrator: load or extract, normalize, score, write."""

    def __init__(
        self,
        *,
        engine: MatchScoringEngine,
        normalizer: ProfileNormalizer,
        loader: ProfileLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._engine = engine
        self._normalizer = normalizer
        self._loader = loader or ProfileLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def score(
        self,
        job: Mapping[str, Any],
        resume: Mapping[str, Any],
    ) -> MatchResult:
        job_profile = self._normalizer.normalize_job(job)
        resume_profile = self._normalizer.normalize_resume(resume)
        try:
            result = self._engine.score(job_profile, resume_profile)
        except InvalidProfile as exc:
            self._logger.warning("match.invalid_profile", missing_fields=exc.missing_fields)
            raise

        self._logger.info(
            "match.result",
            job_category=result.job_category,
            resume_category=result.resume_category,
            overall_score=result.overall_score,
            decision=result.decision.value,
            confidence=result.confidence,
        )
        return result

    def run(
        self,
        *,
        job_path: Path,
        output_path: Path,
        resume_path: Path | None = None,
        audit_logger: "AuditLogger | None" = None,
    ) -> dict[str, Any]:
        try:
            job, resume = self._loader.load_pair(job_path=job_path, resume_path=resume_path)
        except ProfileLoadError as exc:
            self._logger.error("profile.load_failed", errors=exc.errors)
            raise
        result = self.score(job, resume)
        return self._finish(result, output_path, source="profiles", audit_logger=audit_logger)

    def run_documents(
        self,
        *,
        job_document: Path,
        resume_document: Path,
        extractor: ProfileExtractor,
        output_path: Path,
        audit_logger: "AuditLogger | None" = None,
    ) -> dict[str, Any]:
        job_text = extract_text(job_document)
        resume_text = extract_text(resume_document)
        try:
            profiles = extractor.extract(job_text=job_text, resume_text=resume_text)
        except ExtractionError as exc:
            self._logger.error("extraction.failed", error=str(exc))
            raise
        result = self.score(profiles["job"], profiles["resume"])
        return self._finish(result, output_path, source="documents", audit_logger=audit_logger)

    def _finish(
        self,
        result: MatchResult,
        output_path: Path,
        *,
        source: str,
        audit_logger: "AuditLogger | None",
    ) -> dict[str, Any]:
        timestamp = pendulum.now("UTC").to_iso8601_string()
        payload = {
            "metadata": {
                "source": source,
                "timestamp": timestamp,
                "app_version": __version__,
            },
            "result": result.to_dict(),
        }
        self._writer.write(output_path, payload)

        if audit_logger:
            audit_logger.append(
                {
                    "timestamp": timestamp,
                    "source": source,
                    "job_category": result.job_category,
                    "resume_category": result.resume_category,
                    "scores": {
                        category.name: category.score for category in result.categories
                    },
                    "overall_score": result.overall_score,
                    "decision": result.decision.value,
                    "confidence": result.confidence,
                }
            )
        return payload
