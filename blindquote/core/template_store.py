"""
Template Store — fetch-once cache for the three quote templates.

Lifecycle: not_loaded → loading → ready | failed

All templates are fetched concurrently (one worker each) and the results
fanned back in before the state changes. A template that failed to load
stays unavailable until initialize() is called again; the others remain
usable. Generation reads only through get(), which raises
TemplateNotReadyError rather than handing out an empty string.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Callable, Optional

import requests

from . import paths
from .errors import TemplateNotReadyError

log = logging.getLogger("blindquote.templates")

NOT_LOADED = "not_loaded"
LOADING = "loading"
READY = "ready"
FAILED = "failed"


def load_template_text(name: str) -> str:
    """Default loader: HTTP when a base URL is configured, else local file."""
    location = paths.template_location(name)
    if paths.TEMPLATE_BASE_URL:
        resp = requests.get(location, timeout=paths.FETCH_TIMEOUT)
        resp.raise_for_status()
        return resp.text
    with open(location, encoding="utf-8") as f:
        return f.read()


class TemplateStore:
    """Write-once, read-many holder for raw template text."""

    def __init__(self, names=None, loader: Optional[Callable[[str], str]] = None):
        self.names = list(names or paths.TEMPLATE_FILES)
        self._loader = loader or load_template_text
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._templates = {}
        self._errors = {}
        self._state = NOT_LOADED
        self._loaded_at = None
        self._thread = None

    @classmethod
    def from_strings(cls, templates: dict) -> "TemplateStore":
        """Build an already-loaded store from in-memory template text."""
        store = cls(names=list(templates), loader=templates.__getitem__)
        store.initialize()
        return store

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    @property
    def state(self) -> str:
        return self._state

    def initialize(self) -> str:
        """Fetch every template not yet loaded. Returns the resulting state."""
        with self._lock:
            if self._state == LOADING:
                log.info("Template load already in progress")
                return self._state
            pending = [n for n in self.names if not self._templates.get(n)]
            self._state = LOADING
            self._done.clear()

        results = {}
        if pending:
            with ThreadPoolExecutor(max_workers=len(pending),
                                    thread_name_prefix="template-fetch") as pool:
                futures = {name: pool.submit(self._loader, name) for name in pending}
                for name, fut in futures.items():
                    try:
                        results[name] = (fut.result(), None)
                    except Exception as e:  # reported per template below
                        results[name] = (None, e)

        with self._lock:
            for name, (text, err) in results.items():
                if err is not None:
                    self._errors[name] = str(err)
                    log.error("Failed to load template %s: %s", name, err,
                              extra={"template": name})
                elif not text:
                    self._errors[name] = "empty template"
                    log.error("Template %s loaded but is empty", name,
                              extra={"template": name})
                else:
                    self._templates[name] = text
                    self._errors.pop(name, None)
            missing = [n for n in self.names if not self._templates.get(n)]
            self._state = FAILED if missing else READY
            self._loaded_at = datetime.now(timezone.utc).isoformat()
            self._done.set()

        if missing:
            log.warning("Templates unavailable: %s", ", ".join(missing))
        else:
            log.info("All %d HTML templates pre-fetched and cached", len(self.names))
        return self._state

    def start(self, on_done: Optional[Callable[["TemplateStore"], None]] = None) -> threading.Thread:
        """Run initialize() on a background thread (app boot).

        on_done, if given, is called with the store once loading finishes.
        """
        def _run():
            self.initialize()
            if on_done:
                on_done(self)

        self._thread = threading.Thread(target=_run, daemon=True,
                                        name="template-store-init")
        self._thread.start()
        return self._thread

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until loading reaches ready/failed. True if it did."""
        return self._done.wait(timeout)

    # ── Access ────────────────────────────────────────────────────────────────

    def is_loaded(self, name: str) -> bool:
        return bool(self._templates.get(name))

    def get(self, name: str) -> str:
        """Return template text, or raise TemplateNotReadyError."""
        text = self._templates.get(name)
        if not text:
            raise TemplateNotReadyError(name, self._state)
        return text

    def status(self) -> dict:
        """Per-template load status for health/status endpoints."""
        return {
            "state": self._state,
            "loaded_at": self._loaded_at,
            "templates": {
                name: {
                    "loaded": self.is_loaded(name),
                    "chars": len(self._templates.get(name, "")),
                    "error": self._errors.get(name),
                }
                for name in self.names
            },
        }

    def __repr__(self):
        return f"<TemplateStore state={self._state} names={self.names}>"
