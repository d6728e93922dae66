"""Profile extraction backends.

Extraction turns raw document text into the job/resume mappings the
normalizer accepts. Backends are swappable; the scoring core never calls them.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .http import ExtractionError, HTTPProfileExtractor
from .static import StaticProfileExtractor


@runtime_checkable
class ProfileExtractor(Protocol):
    """Extraction backend contract."""

    def extract(self, *, job_text: str, resume_text: str) -> dict[str, Any]:
        """Return ``{"job": {...}, "resume": {...}}`` raw profile mappings."""


__all__ = [
    "ExtractionError",
    "HTTPProfileExtractor",
    "ProfileExtractor",
    "StaticProfileExtractor",
]
