from __future__ import annotations

import logging
from datetime import date
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from .models import BrowserStatement

_log = logging.getLogger("compatlint.releases")


class RuntimeReleaseRegistry:
    """Read-only lookup of runtime release metadata.

    Shape accepted by from_mapping():
      {"chrome": {"releases": {"50": {"release_date": "2016-04-13"}}}, ...}
    optionally wrapped as {"browsers": {...}}.
    """

    def __init__(self, browsers: Optional[Mapping[str, BrowserStatement]] = None):
        self._browsers: Mapping[str, BrowserStatement] = MappingProxyType(dict(browsers or {}))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "RuntimeReleaseRegistry":
        if "browsers" in raw and isinstance(raw["browsers"], Mapping):
            raw = raw["browsers"]

        browsers: Dict[str, BrowserStatement] = {}
        for runtime, data in raw.items():
            try:
                browsers[str(runtime)] = BrowserStatement.model_validate(data)
            except ValidationError as exc:
                _log.warning("Skipping invalid release data for runtime %r: %s", runtime, exc.errors()[:1])
        return cls(browsers)

    def list_runtimes(self) -> list[str]:
        return sorted(self._browsers.keys())

    def get(self, runtime: str) -> Optional[BrowserStatement]:
        return self._browsers.get(runtime)

    def release_date(self, runtime: str, version: str) -> Optional[date]:
        """Unknown runtime, unknown version and missing date all return None."""
        browser = self._browsers.get(runtime)
        if browser is None:
            return None
        release = browser.releases.get(version)
        if release is None:
            return None
        return release.release_date

    def __contains__(self, runtime: object) -> bool:
        return runtime in self._browsers

    def __len__(self) -> int:
        return len(self._browsers)
