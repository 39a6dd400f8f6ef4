from __future__ import annotations

from datetime import date

import pytest

from compatlint.core.lint import LintLogger
from compatlint.core.releases import RuntimeReleaseRegistry
from compatlint.core.specs import SpecDescriptor, build_spec_url_index
from compatlint.rules.obsolete import compute_thresholds


TODAY = date(2026, 6, 15)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    # Never pick up real data files or threshold overrides from the developer's shell
    monkeypatch.setenv("COMPATLINT_SPECS_FILE", str(tmp_path / "no-specs.json"))
    monkeypatch.setenv("COMPATLINT_BROWSERS_FILE", str(tmp_path / "no-browsers.json"))
    monkeypatch.delenv("COMPATLINT_OBSOLETE_WARN_YEARS", raising=False)
    monkeypatch.delenv("COMPATLINT_OBSOLETE_ERROR_YEARS", raising=False)


@pytest.fixture()
def today():
    return TODAY


@pytest.fixture()
def thresholds():
    # warning = 2024-06-15, error = 2023-12-15
    return compute_thresholds(TODAY)


@pytest.fixture()
def registry():
    return RuntimeReleaseRegistry.from_mapping(
        {
            "chrome": {
                "name": "Chrome",
                "releases": {
                    "10": {"release_date": "2011-03-08"},
                    "50": {"release_date": "2023-06-15"},  # 3 years before TODAY
                    "60": {"release_date": "2024-03-15"},  # ~2.25 years before TODAY
                    "70": {"release_date": "2025-06-15"},  # 1 year before TODAY
                    "80": {"status": "planned"},  # no release date yet
                },
            },
            "firefox": {
                "name": "Firefox",
                "releases": {
                    "3.5": {"release_date": "2009-06-30"},
                    "90": {"release_date": "2021-07-13"},
                },
            },
            "ie": {
                "name": "Internet Explorer",
                "releases": {
                    "6": {"release_date": "2001-08-27"},
                    "11": {"release_date": "2013-10-17"},
                },
            },
        }
    )


@pytest.fixture()
def catalog():
    return [
        SpecDescriptor.model_validate(
            {
                "url": "https://www.w3.org/TR/css-color-4/",
                "shortname": "css-color-4",
                "nightly": {
                    "url": "https://drafts.csswg.org/css-color-4/",
                    "alternateUrls": ["https://w3c.github.io/csswg-drafts/css-color-4/"],
                },
                "series": {"shortname": "css-color", "nightlyUrl": "https://drafts.csswg.org/css-color/"},
            }
        ),
        SpecDescriptor.model_validate(
            {
                "url": "https://html.spec.whatwg.org/multipage/",
                "shortname": "html",
                "nightly": {"url": "https://html.spec.whatwg.org/multipage/", "alternateUrls": []},
                "series": {"shortname": "html", "nightlyUrl": "https://html.spec.whatwg.org/multipage/"},
            }
        ),
    ]


@pytest.fixture()
def index(catalog):
    return build_spec_url_index(catalog, ["https://w3c.github.io/setImmediate/"])


@pytest.fixture()
def logger():
    return LintLogger("test", "api.Example.feature")
