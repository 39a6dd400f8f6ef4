from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, Tuple

from .logger import LintSink


class LinterScope(str, Enum):
    FEATURE = "feature"


@dataclass(frozen=True)
class LinterData:
    """
    What a linter receives for one record.

    data: a FeatureRecord or the raw mapping it validates from
    path: fully-qualified record identifier, e.g. "css.types.length.lh"
    """

    data: Any
    path: str = ""


class Linter(Protocol):
    """
    Minimal stable contract for lint rules.

    `exceptions` lists fully-qualified record identifiers whose findings
    are never surfaced for this linter (exact match).
    """

    name: str
    description: str
    scope: LinterScope
    exceptions: Tuple[str, ...]

    def check(self, logger: LintSink, root: LinterData) -> None:
        ...
