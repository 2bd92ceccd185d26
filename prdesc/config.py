"""Configuration loading for prdesc (.prdesc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .classifier import DEFAULT_TICKET_PREFIX
from .locales import SUPPORTED_LOCALES

CONFIG_FILENAME = ".prdesc.yml"
DEFAULT_GH_TIMEOUT = 30.0


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GitHubConfig:
    """Settings forwarded to the GitHub CLI."""

    repo: Optional[str] = None
    timeout: float = DEFAULT_GH_TIMEOUT


@dataclass
class PrDescConfig:
    """Represents the settings defined in .prdesc.yml."""

    root: Path
    locale: str = "en"
    templates_dir: Optional[Path] = None
    ticket_prefix: str = DEFAULT_TICKET_PREFIX
    github: GitHubConfig = field(default_factory=GitHubConfig)


def load_config(config_path: Path) -> PrDescConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PrDescConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    locale = (_as_str(data.get("locale")) or "en").lower()
    if locale not in SUPPORTED_LOCALES:
        locale = "en"

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    ticket_prefix = _as_str(data.get("ticket_prefix")) or DEFAULT_TICKET_PREFIX

    github_data = _as_dict(data.get("github"))
    github = GitHubConfig()
    if github_data:
        github.repo = _as_str(github_data.get("repo"))
        timeout = _as_float(github_data.get("timeout"))
        if timeout is not None and timeout > 0:
            github.timeout = timeout

    return PrDescConfig(
        root=root,
        locale=locale,
        templates_dir=templates_dir,
        ticket_prefix=ticket_prefix.strip().upper(),
        github=github,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "GitHubConfig", "PrDescConfig", "load_config"]
