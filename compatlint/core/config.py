from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# compatlint/core/config.py -> parents[2] = repo root
PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_SPECS_FILE = PROJECT_ROOT / "data" / "browser-specs.json"
DEFAULT_BROWSERS_FILE = PROJECT_ROOT / "data" / "browsers.json"


@dataclass(frozen=True)
class LintSettings:
    specs_file: Path = DEFAULT_SPECS_FILE
    browsers_file: Path = DEFAULT_BROWSERS_FILE

    # Obsolescence age thresholds, in calendar years before "now"
    obsolete_warn_years: float = 2.0
    obsolete_error_years: float = 2.5


def _env_float(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, str(default)))
    except (TypeError, ValueError):
        return default


def _env_path(key: str, default: Path) -> Path:
    raw = os.getenv(key, "").strip()
    return Path(raw) if raw else default


def load_settings(
    *,
    specs_file: Optional[Path] = None,
    browsers_file: Optional[Path] = None,
) -> LintSettings:
    """
    Resolve settings from explicit arguments, then COMPATLINT_* env vars,
    then built-in defaults.
    """
    warn_years = max(0.0, _env_float("COMPATLINT_OBSOLETE_WARN_YEARS", 2.0))
    error_years = _env_float("COMPATLINT_OBSOLETE_ERROR_YEARS", 2.5)
    error_years = max(warn_years, error_years)

    return LintSettings(
        specs_file=Path(specs_file) if specs_file is not None else _env_path("COMPATLINT_SPECS_FILE", DEFAULT_SPECS_FILE),
        browsers_file=(
            Path(browsers_file) if browsers_file is not None else _env_path("COMPATLINT_BROWSERS_FILE", DEFAULT_BROWSERS_FILE)
        ),
        obsolete_warn_years=warn_years,
        obsolete_error_years=error_years,
    )
