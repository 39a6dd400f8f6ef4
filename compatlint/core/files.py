from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import DataLoadError

_log = logging.getLogger("compatlint.files")


def read_structured_file(path: Path, *, kind: str) -> Any:
    """
    Parse a JSON or YAML data file.

    JSON is tried first; YAML is the fallback for hand-maintained files.
    Raises DataLoadError when the file is unreadable or parses as neither.
    """
    try:
        raw_text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(path=path, reason=str(exc), kind=kind) from exc

    try:
        return json.loads(raw_text)
    except json.JSONDecodeError:
        pass

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise DataLoadError(path=path, reason=f"not valid JSON or YAML ({exc})", kind=kind) from exc

    _log.debug("Parsed %s file %s as YAML", kind, path)
    return data
