from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping, Optional, Tuple

from compatlint.core.config import LintSettings, load_settings
from compatlint.core.lint import LinterData, LinterScope, LintLevel, LintSink
from compatlint.core.records import FeatureRecord, SupportEntry
from compatlint.core.releases import RuntimeReleaseRegistry, get_release_registry

from .exceptions import OBSOLETE_EXCEPTIONS

# IE removals alone never make a feature obsolete
IGNORED_RUNTIMES: Tuple[str, ...] = ("ie",)

NEVER_IMPLEMENTED_MESSAGE = (
    "feature was never implemented in any browser and the specification has been abandoned."
)
REMOVED_MESSAGE = (
    "feature was implemented and has since been removed from all browsers dating back two or more years ago."
)

_PROCESS_START = date.today()


@dataclass(frozen=True)
class ObsolescenceThresholds:
    # removals released after `warning` are too recent to report;
    # removals released after `error` (but not after `warning`) are warnings
    warning: date
    error: date


def years_before(now: date, years: float) -> date:
    """Calendar offset: same month/day `years` earlier, clamped to the month's last day."""
    months = int(round(years * 12))
    y, m = divmod(now.year * 12 + (now.month - 1) - months, 12)
    m += 1
    return date(y, m, min(now.day, calendar.monthrange(y, m)[1]))


def compute_thresholds(
    now: Optional[date] = None,
    *,
    warn_years: float = 2.0,
    error_years: float = 2.5,
) -> ObsolescenceThresholds:
    now = now or _PROCESS_START
    return ObsolescenceThresholds(
        warning=years_before(now, warn_years),
        error=years_before(now, max(warn_years, error_years)),
    )


def _as_record(support: Any) -> FeatureRecord:
    """Wrap a support block (raw or already validated) in a FeatureRecord."""
    if isinstance(support, FeatureRecord):
        return support
    if isinstance(support, Mapping) and all(
        isinstance(v, list) and all(isinstance(e, SupportEntry) for e in v) for v in support.values()
    ):
        return FeatureRecord.model_construct(support=dict(support))
    return FeatureRecord.coerce({"support": support})


def never_implemented(support: Any) -> bool:
    for _runtime, entry in _as_record(support).iter_support():
        if entry.is_added:
            return False
    return True


def implemented_and_removed(
    support: Any,
    registry: RuntimeReleaseRegistry,
    thresholds: ObsolescenceThresholds,
    *,
    ignore: Tuple[str, ...] = IGNORED_RUNTIMES,
) -> Optional[LintLevel]:
    """
    Level at which to report a feature removed everywhere, or None.

    Any entry that is not removed, has no concrete removal version, has no
    known release date, or was removed too recently clears the whole record.
    """
    result = LintLevel.ERROR
    for runtime, entry in _as_record(support).iter_support(skip=ignore):
        version = entry.removal_version
        if version is None:
            return None

        released = registry.release_date(runtime, version)
        if released is None:
            return None

        if released > thresholds.warning:
            return None
        if released > thresholds.error:
            result = LintLevel.WARNING

    return result


@dataclass(frozen=True)
class ObsoleteLinter:
    registry: RuntimeReleaseRegistry
    thresholds: ObsolescenceThresholds
    exceptions: Tuple[str, ...] = OBSOLETE_EXCEPTIONS
    name: str = "Obsolete"
    description: str = "Test for obsolete data in each support statement"
    scope: LinterScope = LinterScope.FEATURE

    def check(self, logger: LintSink, root: LinterData) -> None:
        self.process_data(logger, FeatureRecord.coerce(root.data))

    def process_data(self, logger: LintSink, record: FeatureRecord) -> None:
        if record.support is None:
            return

        if record.is_abandoned and never_implemented(record):
            logger.error(NEVER_IMPLEMENTED_MESSAGE)
            return

        # Time-based: depends on the thresholds computed at startup
        level = implemented_and_removed(record, self.registry, self.thresholds)
        if level is None:
            return
        emit = logger.warning if level == LintLevel.WARNING else logger.error
        emit(REMOVED_MESSAGE)


def build_obsolete_linter(
    *,
    registry: Optional[RuntimeReleaseRegistry] = None,
    now: Optional[date] = None,
    settings: Optional[LintSettings] = None,
    exceptions: Iterable[str] = OBSOLETE_EXCEPTIONS,
) -> ObsoleteLinter:
    settings = settings or load_settings()
    return ObsoleteLinter(
        registry=registry if registry is not None else get_release_registry(),
        thresholds=compute_thresholds(
            now,
            warn_years=settings.obsolete_warn_years,
            error_years=settings.obsolete_error_years,
        ),
        exceptions=tuple(exceptions),
    )
