from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from compatlint.core.config import load_settings
from compatlint.core.errors import DataLoadError
from compatlint.core.files import read_structured_file

from .registry import RuntimeReleaseRegistry

_log = logging.getLogger("compatlint.releases")


def load_release_registry(path: Optional[Path] = None) -> RuntimeReleaseRegistry:
    """
    Load runtime release metadata from a JSON or YAML file.

    A missing file yields an empty registry (every release date unknown, so
    nothing is ever judged stale). A present but malformed file raises
    DataLoadError.
    """
    resolved = Path(path) if path is not None else load_settings().browsers_file
    if not resolved.exists():
        _log.warning("Release data file %s not found; release dates are unknown", resolved)
        return RuntimeReleaseRegistry()

    data = read_structured_file(resolved, kind="release data")
    if not isinstance(data, Mapping):
        raise DataLoadError(
            path=resolved,
            reason=f"expected a mapping of runtimes, got {type(data).__name__}",
            kind="release data",
        )

    registry = RuntimeReleaseRegistry.from_mapping(data)
    _log.info("Loaded release data for %d runtimes from %s", len(registry), resolved)
    return registry


@lru_cache(maxsize=None)
def get_release_registry() -> RuntimeReleaseRegistry:
    """Process-wide registry snapshot, loaded on first use."""
    return load_release_registry()
