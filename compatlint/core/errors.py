from __future__ import annotations

from pathlib import Path
from typing import Optional


class CompatLintError(Exception):
    pass


class DataLoadError(CompatLintError):
    """Raised when a catalog or release file exists but cannot be used."""

    def __init__(self, *, path: Path, reason: str, kind: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason
        self.kind = kind
        label = f"{kind} file" if kind else "file"
        super().__init__(f"Cannot load {label} {self.path}: {reason}")
