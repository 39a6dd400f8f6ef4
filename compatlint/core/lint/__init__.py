from .models import LintLevel, LintMessage, LintResult
from .logger import LintLogger, LintSink
from .contracts import Linter, LinterData, LinterScope
from .engine import LinterEngine

__all__ = [
    "LintLevel",
    "LintMessage",
    "LintResult",
    "LintLogger",
    "LintSink",
    "Linter",
    "LinterData",
    "LinterScope",
    "LinterEngine",
]
