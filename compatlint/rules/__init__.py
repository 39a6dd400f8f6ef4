from functools import lru_cache

from compatlint.core.lint import LinterEngine

from .obsolete import ObsoleteLinter, build_obsolete_linter, implemented_and_removed, never_implemented
from .spec_urls import SpecUrlsLinter, build_spec_urls_linter, default_spec_url_index


def default_linters() -> list:
    return [
        build_obsolete_linter(),
        build_spec_urls_linter(),
    ]


@lru_cache(maxsize=None)
def default_linter_engine() -> LinterEngine:
    return LinterEngine(default_linters())


__all__ = [
    "ObsoleteLinter",
    "SpecUrlsLinter",
    "build_obsolete_linter",
    "build_spec_urls_linter",
    "default_linter_engine",
    "default_linters",
    "default_spec_url_index",
    "implemented_and_removed",
    "never_implemented",
]
