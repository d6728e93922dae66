"""HTTP client for a remote profile extraction service."""

from __future__ import annotations

import json
from typing import Any
from urllib import error, request

import structlog

SCHEMA_VERSION = "1"


class ExtractionError(RuntimeError):
    """Raised when the extraction backend cannot produce profiles."""


class HTTPProfileExtractor:
    """POST document text to an extraction endpoint and return raw profiles."""

    def __init__(self, endpoint: str, api_key: str | None = None, *, timeout: float = 30.0):
        self._endpoint = endpoint
        self._api_key = api_key
        self._timeout = timeout
        self._logger = structlog.get_logger(__name__)

    def extract(self, *, job_text: str, resume_text: str) -> dict[str, Any]:
        payload = {
            "job_text": job_text,
            "resume_text": resume_text,
            "schema_version": SCHEMA_VERSION,
        }
        data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"

        req = request.Request(self._endpoint, data=data, headers=headers, method="POST")
        try:
            with request.urlopen(req, timeout=self._timeout) as resp:
                raw = resp.read()
        except (error.URLError, OSError) as exc:
            self._logger.warning("extraction.request_failed", endpoint=self._endpoint, error=str(exc))
            raise ExtractionError(f"Extraction request failed: {exc}") from exc

        try:
            body = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"Extraction response is not UTF-8: {exc}") from exc
        return self._parse(body)

    @staticmethod
    def _parse(body: str) -> dict[str, Any]:
        try:
            decoded = json.loads(body) if body else None
        except json.JSONDecodeError as exc:
            raise ExtractionError(f"Extraction response is not JSON: {exc}") from exc
        if not isinstance(decoded, dict):
            raise ExtractionError("Extraction response must be a JSON object")

        missing = [key for key in ("job", "resume") if not isinstance(decoded.get(key), dict)]
        if missing:
            raise ExtractionError(f"Extraction response missing objects: {missing}")
        return {"job": decoded["job"], "resume": decoded["resume"]}
