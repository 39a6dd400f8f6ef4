from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class LintLevel(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class LintMessage:
    level: LintLevel
    title: str
    path: str
    message: str
    tip: Optional[str] = None


@dataclass(frozen=True)
class LintResult:
    linter: str
    path: str
    messages: Tuple[LintMessage, ...] = ()
    # True when the record is on the linter's exception list
    exempt: bool = False

    @property
    def errors(self) -> Tuple[LintMessage, ...]:
        return tuple(m for m in self.messages if m.level == LintLevel.ERROR)

    @property
    def warnings(self) -> Tuple[LintMessage, ...]:
        return tuple(m for m in self.messages if m.level == LintLevel.WARNING)
