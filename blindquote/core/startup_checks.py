"""
blindquote/core/startup_checks.py — Runtime Self-Test on App Boot

Runs once the template store has finished loading. Catches the template
asset problems that only show up at render time:

  1. Path resolution — template files / URLs resolve
  2. Template load — every template is cached
  3. Structure — the tags the assembler splices around are present
  4. Placeholders — the keys the renderer supplies are referenced

Never raises; returns a summary the app factory logs.
"""

import logging

from . import paths
from .template_store import TemplateStore
from ..forms.placeholders import find_placeholders

log = logging.getLogger("blindquote.startup")

# template key → (required markers, placeholder keys the renderer fills in)
_EXPECTATIONS = {
    paths.QUOTE_TEMPLATE: (["</head>", "<body", "</body>"], ["customerInfoHtml", "itemsTableBody"]),
    paths.DETAILS_TEMPLATE: (["<body", "</body>"], ["rollerBlindsTable"]),
    paths.GMAIL_TEMPLATE: (["</body>"], ["customerInfoHtml", "itemsTableBody"]),
}


def run_startup_checks(store: TemplateStore) -> dict:
    """Run all startup validation checks against a loaded store.

    Returns:
        {"passed": int, "failed": int, "warnings": int, "details": [...]}
    """
    results = {"passed": 0, "failed": 0, "warnings": 0, "details": []}

    def _pass(msg):
        results["passed"] += 1
        results["details"].append(("PASS", msg))
        log.info("✅ %s", msg)

    def _fail(msg):
        results["failed"] += 1
        results["details"].append(("FAIL", msg))
        log.error("❌ STARTUP CHECK FAILED: %s", msg)

    def _warn(msg):
        results["warnings"] += 1
        results["details"].append(("WARN", msg))
        log.warning("⚠️  %s", msg)

    # ── 1. Path Validation ────────────────────────────────────────────────────
    path_result = paths.validate_paths()
    if path_result["ok"]:
        _pass("All template paths valid")
    else:
        for err in path_result["errors"]:
            _fail(err)
    for warn in path_result.get("warnings", []):
        _warn(warn)

    # ── 2-4. Per-template checks ──────────────────────────────────────────────
    for name in store.names:
        if not store.is_loaded(name):
            err = store.status()["templates"][name]["error"]
            _fail(f"{name}: not loaded ({err or store.state})")
            continue
        text = store.get(name)
        _pass(f"{name}: loaded ({len(text)} chars)")

        markers, keys = _EXPECTATIONS.get(name, ([], []))
        lowered = text.lower()
        missing = [m for m in markers if m not in lowered]
        if missing:
            _fail(f"{name}: missing {', '.join(missing)}")

        tokens = find_placeholders(text)
        unused = [k for k in keys if k not in tokens]
        if unused:
            _warn(f"{name}: never references {', '.join(unused)}")
        elif keys:
            _pass(f"{name}: {len(tokens)} placeholders")

    return results
