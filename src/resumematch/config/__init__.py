"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import load_config


class ConfigManager:
    """YAML-backed loader for weighting configurations."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        return _read_yaml(self._base_path / f"{name}.yaml")

    def load_settings(self, name: str) -> dict[str, Any]:
        """Load, validate and flatten a configuration into container settings."""
        return load_config(self.load(name)).to_settings()

    @staticmethod
    def settings_from_file(path: str | Path) -> dict[str, Any]:
        return load_config(_read_yaml(Path(path))).to_settings()


def _read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


__all__ = ["ConfigManager"]
