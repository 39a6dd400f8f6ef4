from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .contracts import Linter, LinterData, LinterScope
from .logger import LintLogger
from .models import LintLevel, LintResult

_log = logging.getLogger("compatlint.lint")


class LinterEngine:
    def __init__(self, linters: Iterable[Linter] = ()):
        self._linters: Dict[str, Linter] = {}
        for linter in linters:
            self.register(linter)

    def register(self, linter: Linter) -> None:
        if linter.name in self._linters:
            raise ValueError(f"Duplicate linter name: {linter.name}")
        self._linters[linter.name] = linter

    def list_linters(self) -> List[str]:
        return list(self._linters.keys())

    def get(self, name: str) -> Optional[Linter]:
        return self._linters.get(name)

    @staticmethod
    def is_exempt(linter: Linter, path: str) -> bool:
        return path in (getattr(linter, "exceptions", None) or ())

    def run(self, root: LinterData, *, scope: LinterScope = LinterScope.FEATURE) -> List[LintResult]:
        results: List[LintResult] = []
        for linter in self._linters.values():
            if linter.scope != scope:
                continue

            if self.is_exempt(linter, root.path):
                results.append(LintResult(linter=linter.name, path=root.path, exempt=True))
                continue

            logger = LintLogger(linter.name, root.path)
            try:
                linter.check(logger, root)
            except Exception as e:
                _log.warning("Linter %s failed on %s: %s", linter.name, root.path, e)
                logger.error(f"Linter execution failed: {e}")

            results.append(LintResult(linter=linter.name, path=root.path, messages=tuple(logger.messages)))

        _log.debug(
            "lint.run path=%s linters=%s findings=%s",
            root.path,
            len(results),
            sum(len(r.messages) for r in results),
        )
        return results

    @staticmethod
    def is_blocking(results: List[LintResult]) -> bool:
        return any(m.level == LintLevel.ERROR for r in results for m in r.messages)
