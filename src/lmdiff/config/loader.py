"""Load and merge configuration from .lmdiff.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from lmdiff.config.defaults import CONFIG_FILENAME
from lmdiff.config.schema import LmdiffConfig, OutputConfig, ReviewConfig

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


def _merge_env_overrides(cfg: LmdiffConfig) -> None:
    """Apply LMDIFF_* environment variable overrides."""
    if val := os.environ.get("LMDIFF_BRANCH"):
        cfg.review.branch = val.strip()
    if val := os.environ.get("LMDIFF_INCLUDE_UNTRACKED"):
        cfg.review.include_untracked = _parse_bool("LMDIFF_INCLUDE_UNTRACKED", val)
    if val := os.environ.get("LMDIFF_COPY"):
        cfg.output.copy = _parse_bool("LMDIFF_COPY", val)


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> LmdiffConfig:
    """Load and return an LmdiffConfig (defaults < file < environment)."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = LmdiffConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = LmdiffConfig(
            version=raw.get("version", "1.0"),
            review=_build_section(raw, ReviewConfig, "review"),
            output=_build_section(raw, OutputConfig, "output"),
        )

    _merge_env_overrides(cfg)
    return cfg
