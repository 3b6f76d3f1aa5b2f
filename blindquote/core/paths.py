"""
blindquote/core/paths.py — Centralized Path Configuration

Single source of truth for the data directory and the three quote
templates. Every module imports from here instead of computing its own paths.

Templates are read from local files under TEMPLATE_DIR unless
BLINDQUOTE_TEMPLATE_URL is set, in which case they are fetched over HTTP
from {BLINDQUOTE_TEMPLATE_URL}/{filename}.
"""

import os
import logging

log = logging.getLogger("blindquote.paths")

# ── Project Root ──────────────────────────────────────────────────────────────
_THIS_FILE = os.path.abspath(__file__)
PACKAGE_DIR = os.path.dirname(os.path.dirname(_THIS_FILE))
PROJECT_ROOT = os.path.dirname(PACKAGE_DIR)

# ── Data directory (logs live underneath) ────────────────────────────────────
DATA_DIR = os.environ.get("BLINDQUOTE_DATA_DIR", "") or os.path.join(PROJECT_ROOT, "data")
LOG_DIR = os.path.join(DATA_DIR, "logs")

# ── Template sources ─────────────────────────────────────────────────────────
_PACKAGED_TEMPLATE_DIR = os.path.join(PACKAGE_DIR, "templates")
TEMPLATE_DIR = os.environ.get("BLINDQUOTE_TEMPLATE_DIR", "") or _PACKAGED_TEMPLATE_DIR
TEMPLATE_BASE_URL = os.environ.get("BLINDQUOTE_TEMPLATE_URL", "").rstrip("/")
FETCH_TIMEOUT = float(os.environ.get("BLINDQUOTE_FETCH_TIMEOUT", "15"))

# Template key → filename. Keys are the names generation asks the store for.
QUOTE_TEMPLATE = "quoteTemplate"
DETAILS_TEMPLATE = "detailedItemList"
GMAIL_TEMPLATE = "gmailSimple"

TEMPLATE_FILES = {
    QUOTE_TEMPLATE: "quote-template.html",
    DETAILS_TEMPLATE: "detailed-item-list.html",
    GMAIL_TEMPLATE: "gmail-simple.html",
}


def template_location(name: str) -> str:
    """Path or URL a template key resolves to."""
    filename = TEMPLATE_FILES[name]
    if TEMPLATE_BASE_URL:
        return f"{TEMPLATE_BASE_URL}/{filename}"
    return os.path.join(TEMPLATE_DIR, filename)


def validate_paths() -> dict:
    """Runtime validation — call at app startup to catch path issues early.

    Returns:
        {"ok": bool, "errors": [str], "warnings": [str], "resolved": {name: path}}
    """
    result = {"ok": True, "errors": [], "warnings": [], "resolved": {}}
    result["resolved"]["DATA_DIR"] = DATA_DIR

    if TEMPLATE_BASE_URL:
        # Remote templates: nothing on disk to check, the fetch reports errors
        result["resolved"]["TEMPLATE_BASE_URL"] = TEMPLATE_BASE_URL
        for name in TEMPLATE_FILES:
            result["resolved"][name] = template_location(name)
    else:
        result["resolved"]["TEMPLATE_DIR"] = TEMPLATE_DIR
        if not os.path.isdir(TEMPLATE_DIR):
            result["errors"].append(f"TEMPLATE_DIR not found: {TEMPLATE_DIR}")
            result["ok"] = False
        for name in TEMPLATE_FILES:
            path = template_location(name)
            result["resolved"][name] = path
            if not os.path.isfile(path):
                result["errors"].append(f"{name} not found: {path}")
                result["ok"] = False

    try:
        os.makedirs(LOG_DIR, exist_ok=True)
    except OSError as e:
        result["warnings"].append(f"LOG_DIR not writable: {e}")

    return result
