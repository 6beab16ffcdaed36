"""PageActions configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from pageactions.models import DEFAULT_TIMEOUT_MS, DEFAULT_VIEWPORT


class PageActionsConfigError(Exception):
    """Raised when configuration is invalid or missing."""

    pass


@dataclass
class PageActionsConfig:
    """Configuration for a PageActions run."""

    url: str = ""
    actions: list[str] = field(default_factory=list)

    # Browser
    headless: bool = True
    viewport: tuple[int, int] = DEFAULT_VIEWPORT
    timeout: int = DEFAULT_TIMEOUT_MS

    @classmethod
    def from_file(cls, config_path: Path) -> PageActionsConfig:
        """Load config from a YAML file."""
        if not config_path.exists():
            raise PageActionsConfigError(f"Config file not found: {config_path}")
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise PageActionsConfigError(f"YAML parse error in {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PageActionsConfigError(f"Config file must be a YAML mapping: {config_path}")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> PageActionsConfig:
        """Create config from a dictionary."""
        config = cls()

        if "url" in data:
            config.url = str(data["url"] or "")

        if "actions" in data:
            actions = data["actions"] or []
            if not isinstance(actions, list):
                raise PageActionsConfigError("'actions' must be a list of action strings")
            config.actions = [str(a) for a in actions]

        if "headless" in data:
            config.headless = bool(data["headless"])
        if "timeout" in data:
            try:
                config.timeout = int(data["timeout"])
            except (TypeError, ValueError):
                raise PageActionsConfigError(f"'timeout' must be an integer (ms), got: {data['timeout']!r}") from None
        if "viewport" in data:
            vp = data["viewport"]
            if isinstance(vp, dict):
                config.viewport = (vp.get("width", DEFAULT_VIEWPORT[0]), vp.get("height", DEFAULT_VIEWPORT[1]))

        return config
