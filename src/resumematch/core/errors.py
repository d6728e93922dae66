"""Errors raised by the scoring core."""

from __future__ import annotations


class InvalidProfile(ValueError):
    """Raised when a required profile field is absent after normalization."""

    def __init__(self, missing_fields: list[str]):
        super().__init__("Profile is missing required fields")
        self.missing_fields = missing_fields

    def __str__(self) -> str:
        return f"Profile is missing required fields: {', '.join(self.missing_fields)}"
