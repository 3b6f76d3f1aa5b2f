#!/usr/bin/env python3
"""
BlindQuote — Application Entry Point
Creates the Flask app, starts the template fetch and registers the quote routes.

For gunicorn: gunicorn "app:create_app()"
"""

import os
import time
import logging
from flask import Flask, request

from logging_config import setup_logging
from blindquote.api.routes_quote import bp, EXTENSION_KEY
from blindquote.core.pricing import PassThroughPricingProvider
from blindquote.core.startup_checks import run_startup_checks
from blindquote.core.template_store import TemplateStore, READY, FAILED
from blindquote.forms.quote_html import QuoteGeneratorService

log = logging.getLogger("blindquote")


def _report_startup(store):
    checks = run_startup_checks(store)
    if checks["failed"] > 0:
        log.error("STARTUP: %d checks FAILED — review logs", checks["failed"])
    else:
        log.info("STARTUP: %d checks passed, %d warnings",
                 checks["passed"], checks["warnings"])


def create_app(store=None, pricing_provider=None):
    """Application factory.

    Without an injected store the templates are fetched on a background
    thread; quote routes answer 503 until they are loaded.
    """
    app = Flask(__name__)
    app.secret_key = os.environ.get("SECRET_KEY", "blindquote-dev")

    if store is None:
        setup_logging()
        store = TemplateStore()
        store.start(on_done=_report_startup)
    elif store.state in (READY, FAILED):
        _report_startup(store)

    service = QuoteGeneratorService(pricing_provider or PassThroughPricingProvider(), store)
    app.extensions[EXTENSION_KEY] = {"store": store, "service": service}
    app.register_blueprint(bp)

    # ── Request-level structured logging ──────────────────────────────────────
    @app.before_request
    def _log_request_start():
        request.environ["blindquote.start"] = time.time()

    @app.after_request
    def _log_request_end(response):
        start = request.environ.get("blindquote.start")
        if start is not None and request.path != "/api/health":
            duration_ms = round((time.time() - start) * 1000, 1)
            log.info("%s %s → %d (%.0fms)",
                     request.method, request.path, response.status_code, duration_ms,
                     extra={"route": request.path, "method": request.method,
                            "status": response.status_code, "duration_ms": duration_ms})
        return response

    return app


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    create_app().run(host="0.0.0.0", port=port, debug=False)
