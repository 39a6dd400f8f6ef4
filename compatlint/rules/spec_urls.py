from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional, Tuple

from compatlint.core.lint import LinterData, LinterScope, LintSink
from compatlint.core.records import FeatureRecord
from compatlint.core.specs import SpecUrlIndex, build_spec_url_index, load_spec_catalog

from .exceptions import SPEC_URL_EXCEPTIONS

# drafts.csswg.org is down too often; w3c.github.io/csswg-drafts mirrors it
UNRELIABLE_PREFIX = "https://drafts.csswg.org"
UNRELIABLE_HOST = "drafts.csswg.org"
STABLE_HOST = "w3c.github.io/csswg-drafts"


def canonical_mirror_url(url: str) -> Optional[str]:
    """Stable replacement for an unreliable-mirror URL, or None for any other URL."""
    if not url.startswith(UNRELIABLE_PREFIX):
        return None
    return url.replace(UNRELIABLE_HOST, STABLE_HOST, 1)


@dataclass(frozen=True)
class SpecUrlsLinter:
    index: SpecUrlIndex
    exceptions: Tuple[str, ...] = ()
    name: str = "Spec URLs"
    description: str = "Ensure the spec_url values match spec URLs in w3c/browser-specs (or defined exceptions)"
    scope: LinterScope = LinterScope.FEATURE

    def check(self, logger: LintSink, root: LinterData) -> None:
        self.process_data(logger, FeatureRecord.coerce(root.data))

    def is_allowed(self, url: str) -> bool:
        if self.index.allows(url):
            return True
        canonical = canonical_mirror_url(url)
        return canonical is not None and self.index.allows(canonical)

    def process_data(self, logger: LintSink, record: FeatureRecord) -> None:
        for url in record.spec_url:
            canonical = canonical_mirror_url(url)
            if canonical is not None:
                logger.error(
                    f"Due to how often https://{UNRELIABLE_HOST} is down, use https://{STABLE_HOST} instead.",
                    tip=f"replace {url} with {canonical}",
                )

            if not self.is_allowed(url):
                logger.error(
                    f"Invalid specification URL found: {url}. Try a more current specification URL "
                    "and/or check if the specification URL is listed in https://github.com/w3c/browser-specs."
                )


@lru_cache(maxsize=None)
def default_spec_url_index() -> SpecUrlIndex:
    """Catalog + SPEC_URL_EXCEPTIONS, built once per process."""
    return build_spec_url_index(load_spec_catalog(), SPEC_URL_EXCEPTIONS)


def build_spec_urls_linter(
    *,
    index: Optional[SpecUrlIndex] = None,
    exceptions: Iterable[str] = (),
) -> SpecUrlsLinter:
    return SpecUrlsLinter(
        index=index if index is not None else default_spec_url_index(),
        exceptions=tuple(exceptions),
    )
