from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from .models import LintLevel, LintMessage

_log = logging.getLogger("compatlint.lint")


class LintSink(Protocol):
    """Where linters report findings. One method per severity."""

    def error(self, message: str, *, tip: Optional[str] = None) -> None:
        ...

    def warning(self, message: str, *, tip: Optional[str] = None) -> None:
        ...


class LintLogger:
    """Buffers the findings of one linter for one record."""

    def __init__(self, title: str, path: str = ""):
        self.title = title
        self.path = path
        self.messages: List[LintMessage] = []

    def error(self, message: str, *, tip: Optional[str] = None) -> None:
        self.log(LintLevel.ERROR, message, tip=tip)

    def warning(self, message: str, *, tip: Optional[str] = None) -> None:
        self.log(LintLevel.WARNING, message, tip=tip)

    def log(self, level: LintLevel, message: str, *, tip: Optional[str] = None) -> None:
        level = LintLevel(level)
        self.messages.append(
            LintMessage(level=level, title=self.title, path=self.path, message=message, tip=tip)
        )
        _log.debug("lint.%s linter=%s path=%s message=%s", level.value, self.title, self.path, message)
