"""Utilities for extracting plain text from PDF documents."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Sequence

import pymupdf4llm


class DocumentIngestionError(ValueError):
    """Raised when a document cannot be converted into usable text."""


def extract_text(
    pdf_path: str | Path,
    *,
    exclude_patterns: Sequence[str] | None = None,
) -> str:
    """Return text extracted from a PDF with boilerplate lines removed.

    Parameters
    ----------
    pdf_path:
        Path to the source PDF file.
    exclude_patterns:
        Optional substrings; any line containing one of them (optionally
        followed by a page counter such as ``1 / 3``) is dropped.
    """

    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise DocumentIngestionError(f"Document not found: {pdf_path}")

    try:
        markdown = pymupdf4llm.to_markdown(str(pdf_path))
    except Exception as exc:  # noqa: BLE001
        raise DocumentIngestionError(f"Failed to extract text from {pdf_path.name}: {exc}") from exc

    patterns = _build_patterns(exclude_patterns or ())
    lines = [
        line
        for line in markdown.splitlines()
        if not (line.strip() and any(pattern.search(line) for pattern in patterns))
    ]
    text = "\n".join(lines).strip()
    if not text:
        raise DocumentIngestionError(f"No text could be extracted from {pdf_path.name}")
    return text


def _build_patterns(excludes: Iterable[str]) -> list[re.Pattern[str]]:
    patterns: list[re.Pattern[str]] = []
    for text in excludes:
        escaped = re.escape(text)
        # Allow optional whitespace and page counter suffix like " 1 / 3".
        patterns.append(re.compile(rf"{escaped}(?:\s+\d+\s*/\s*\d+)?"))
    return patterns


__all__ = ["DocumentIngestionError", "extract_text"]
