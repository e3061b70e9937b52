"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``PARETO_ANALYZER_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The CLI builds one ``AppConfig`` per invocation and passes the relevant
sections down; the analysis engine itself only takes plain arguments.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Callable, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class ParsingConfig(BaseModel):
    """Tabular parser behaviour."""

    model_config = ConfigDict(frozen=True)

    # False reproduces raw comma splitting; True keeps commas inside "quoted" cells.
    honor_quotes: bool = False


class SourceConfig(BaseModel):
    """Remote document fetch settings."""

    model_config = ConfigDict(frozen=True)

    timeout_s: float = 30.0
    follow_redirects: bool = True

    @field_validator("timeout_s")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout_s must be > 0, got {v}.")
        return v


class ReportConfig(BaseModel):
    """Report output and terminal display settings."""

    model_config = ConfigDict(frozen=True)

    output_dir: str = "data/outputs/reports"
    top_n: int = 10

    @field_validator("top_n")
    @classmethod
    def validate_top_n(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"top_n must be >= 0, got {v}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    parsing: ParsingConfig = ParsingConfig()
    source: SourceConfig = SourceConfig()
    report: ReportConfig = ReportConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

ENV_PREFIX = "PARETO_ANALYZER_"


def _env_flag(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


# env var suffix -> (section or None for top level, key, converter).
# Numeric values stay strings so pydantic reports bad input as a ValidationError.
_ENV_OVERRIDES: dict[str, tuple[Optional[str], str, Callable[[str], Any]]] = {
    "LOG_LEVEL":    ("logging", "level", str),
    "TIMEOUT_S":    ("source", "timeout_s", str),
    "HONOR_QUOTES": ("parsing", "honor_quotes", _env_flag),
    "DEBUG":        (None, "debug", _env_flag),
}


def _project_root() -> Path:
    """Nearest ancestor of this package holding ``pyproject.toml``."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents[:4]):
        if (candidate / "pyproject.toml").is_file():
            return candidate
    return here.parent


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as fh:
        return tomllib.load(fh)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Build the merged, validated ``AppConfig``.

    Args:
        config_path: TOML file to start from.  When omitted,
            ``config/default.toml`` under the project root is used.  A
            ``local.toml`` in the same directory is layered on top.

    Raises:
        FileNotFoundError: If the base TOML file is missing.
        pydantic.ValidationError: If a merged value is invalid.
    """
    root = _project_root()
    load_dotenv(dotenv_path=root / ".env", override=False)

    base_path = Path(config_path) if config_path is not None else root / "config" / "default.toml"
    if not base_path.is_file():
        raise FileNotFoundError(
            f"Config file not found: {base_path}\n"
            "Pass --config or create config/default.toml first."
        )

    raw = _read_toml(base_path)
    local_path = base_path.with_name("local.toml")
    if local_path.is_file():
        raw = _deep_merge(raw, _read_toml(local_path))

    return AppConfig(**_apply_env_overrides(raw))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated with ``override``; nested tables merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Layer ``PARETO_ANALYZER_*`` environment variables over ``raw``.

    Supported: ``LOG_LEVEL``, ``TIMEOUT_S``, ``HONOR_QUOTES``, ``DEBUG``.
    Empty values are ignored.
    """
    for suffix, (section, key, convert) in _ENV_OVERRIDES.items():
        value = os.environ.get(ENV_PREFIX + suffix)
        if not value:
            continue
        target = raw if section is None else raw.setdefault(section, {})
        target[key] = convert(value)
    return raw
