"""Extractor returning fixed profiles."""

from __future__ import annotations

import copy
from typing import Any


class StaticProfileExtractor:
    """Return pre-built profile mappings regardless of the document text."""

    def __init__(self, job: dict[str, Any], resume: dict[str, Any]):
        self._job = job
        self._resume = resume
        self.calls: int = 0

    def extract(self, *, job_text: str, resume_text: str) -> dict[str, Any]:
        self.calls += 1
        return {"job": copy.deepcopy(self._job), "resume": copy.deepcopy(self._resume)}
