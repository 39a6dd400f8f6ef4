"""Hand-maintained exception lists for the built-in linters."""

# Before adding an exception, open an issue with https://github.com/w3c/browser-specs
# to see if the spec should be added there instead. Every entry states how it
# can be removed.
SPEC_URL_EXCEPTIONS = (
    # Remove once https://github.com/whatwg/html/pull/6715 is resolved
    "https://wicg.github.io/controls-list/",
    # Remove once Window.{clearImmediate,setImmediate} are irrelevant and removed
    "https://w3c.github.io/setImmediate/",
    # Remove if supported in browser-specs https://github.com/w3c/browser-specs/issues/339
    "https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-digest-headers-05",
    "https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-expect-ct-08",
    # April Fools' RFC for "418 I'm a teapot"
    "https://www.rfc-editor.org/rfc/rfc2324",
    # No rendered spec, so not in browser-specs. Remove if merged into the main ECMA spec
    "https://github.com/tc39/proposal-regexp-legacy-features/",
    # 'shared' flag in WebAssembly.Memory. Remove if merged into the main WebAssembly spec
    "https://webassembly.github.io/threads/js-api/",
    # Remove if https://github.com/w3c/webrtc-extensions/issues/108 is closed
    "https://w3c.github.io/webrtc-extensions/",
    # Remove when added to browser-specs
    "https://w3c.github.io/csswg-drafts/css-color-6/",
    # Remove if https://github.com/w3c/browser-specs/issues/730 is resolved
    "https://w3c.github.io/csswg-drafts/css2",
)

# Accepted legacy records the obsolete linter never reports.
OBSOLETE_EXCEPTIONS = (
    "css.types.length.lh",
    "css.types.length.rlh",
    "http.headers.Cache-Control.stale-if-error",
    "http.headers.Feature-Policy.layout-animations",
    "http.headers.Feature-Policy.legacy-image-formats",
    "http.headers.Feature-Policy.oversized-images",
    "http.headers.Feature-Policy.unoptimized-images",
    "http.headers.Feature-Policy.unsized-media",
    "svg.elements.view.zoomAndPan",
)
