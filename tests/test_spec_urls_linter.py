from compatlint.core.lint import LintLevel, LintLogger, LinterData
from compatlint.core.specs import build_spec_url_index
from compatlint.rules.spec_urls import build_spec_urls_linter, canonical_mirror_url


def _run(linter, data):
    logger = LintLogger(linter.name, "css.properties.foo")
    linter.check(logger, LinterData(data=data, path="css.properties.foo"))
    return logger.messages


def test_no_spec_url_no_findings(index):
    linter = build_spec_urls_linter(index=index)
    assert _run(linter, {"support": {}}) == []


def test_allowed_url_no_findings(index):
    linter = build_spec_urls_linter(index=index)
    assert _run(linter, {"spec_url": "https://html.spec.whatwg.org/multipage/dom.html#dom-document"}) == []


def test_unknown_url_single_error():
    linter = build_spec_urls_linter(index=build_spec_url_index([], []))
    msgs = _run(linter, {"spec_url": "https://example.com/nonexistent-spec/"})
    assert len(msgs) == 1
    assert msgs[0].level == LintLevel.ERROR
    assert "https://example.com/nonexistent-spec/" in msgs[0].message
    assert "https://github.com/w3c/browser-specs" in msgs[0].message


def test_mirror_url_reports_replacement_only():
    idx = build_spec_url_index([], ["https://w3c.github.io/csswg-drafts/"])
    linter = build_spec_urls_linter(index=idx)

    msgs = _run(linter, {"spec_url": "https://drafts.csswg.org/css-foo/"})

    assert len(msgs) == 1
    assert msgs[0].level == LintLevel.ERROR
    assert msgs[0].tip == "replace https://drafts.csswg.org/css-foo/ with https://w3c.github.io/csswg-drafts/css-foo/"


def test_mirror_url_not_in_catalog_reports_both():
    linter = build_spec_urls_linter(index=build_spec_url_index([], []))
    msgs = _run(linter, {"spec_url": "https://drafts.csswg.org/css-foo/#prop"})
    assert len(msgs) == 2
    assert all(m.level == LintLevel.ERROR for m in msgs)
    assert msgs[0].tip is not None
    assert msgs[1].tip is None


def test_mirror_url_listed_in_catalog_still_gets_replacement_hint(index):
    linter = build_spec_urls_linter(index=index)
    msgs = _run(linter, {"spec_url": "https://drafts.csswg.org/css-color-4/#the-color-property"})
    assert len(msgs) == 1
    assert "w3c.github.io/csswg-drafts" in msgs[0].message


def test_each_url_checked_independently(index):
    linter = build_spec_urls_linter(index=index)
    msgs = _run(
        linter,
        {
            "spec_url": [
                "https://html.spec.whatwg.org/multipage/#a",
                "https://example.com/one/",
                "https://example.com/two/",
            ]
        },
    )
    assert len(msgs) == 2
    assert "https://example.com/one/" in msgs[0].message
    assert "https://example.com/two/" in msgs[1].message


def test_repeated_runs_are_identical(index):
    linter = build_spec_urls_linter(index=index)
    data = {"spec_url": ["https://drafts.csswg.org/nope/", "https://example.com/x/"]}
    first = _run(linter, data)
    second = _run(linter, data)
    assert first == second
    assert len(index) == 6


def test_canonical_mirror_url_only_rewrites_mirror():
    assert canonical_mirror_url("https://drafts.csswg.org/a/") == "https://w3c.github.io/csswg-drafts/a/"
    assert canonical_mirror_url("https://example.org/drafts.csswg.org/") is None


def test_linter_descriptor_fields(index):
    linter = build_spec_urls_linter(index=index)
    assert linter.name == "Spec URLs"
    assert linter.scope.value == "feature"
    assert linter.exceptions == ()
