"""Deterministic resume-to-job match scoring."""

__version__ = "0.1.0"
