"""Load engine settings from .env, environment and an optional YAML file."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from salary_engine.log import get_logger

log = get_logger(__name__)

load_dotenv()

SETTINGS_FILE: Path = Path("config") / "settings.yaml"

MIN_SAMPLE_SIZE = 3
HOURS_PER_YEAR = 2080  # 52 weeks x 40 hours


@dataclass(frozen=True)
class Settings:
    postings_path: Path | None = None
    min_sample_size: int = MIN_SAMPLE_SIZE
    hours_per_year: int = HOURS_PER_YEAR


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def base_dir() -> Path:
    """Directory relative paths resolve against: $SALARY_HOME, else the CWD."""
    return Path(get_env("SALARY_HOME") or os.getcwd()).expanduser()


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        log.warning("Ignoring %s: expected a mapping, got %s", path.name, type(data).__name__)
        return {}
    return data


def _resolve_path(raw: str | None) -> Path | None:
    if not raw:
        return None
    p = Path(raw).expanduser()
    if not p.is_absolute():
        p = base_dir() / p
    return p


def load_settings(path: Path | None = None) -> Settings:
    """Merge YAML settings with env overrides.

    ``SALARY_SETTINGS_PATH`` points at an alternative YAML file and
    ``SALARY_POSTINGS_PATH`` overrides ``postings_path`` from the file.
    Relative paths resolve against ``base_dir()``.
    """
    if path is None:
        path = _resolve_path(get_env("SALARY_SETTINGS_PATH")) or base_dir() / SETTINGS_FILE
    data = _read_yaml(path)

    postings_raw = get_env("SALARY_POSTINGS_PATH") or data.get("postings_path")
    settings = Settings(
        postings_path=_resolve_path(postings_raw),
        min_sample_size=int(data.get("min_sample_size", MIN_SAMPLE_SIZE)),
        hours_per_year=int(data.get("hours_per_year", HOURS_PER_YEAR)),
    )
    log.debug("Loaded settings from %s: %s", path, settings)
    return settings
