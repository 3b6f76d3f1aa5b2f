# routes_quote.py
"""
Quote preview routes.

    GET  /api/health                    liveness + template store state
    GET  /api/quote/templates           per-template status and placeholders
    POST /api/quote/templates/reload    retry the template fetch
    POST /api/quote/preview             detailed printable quote (text/html)
    POST /api/quote/gmail               email-safe quote summary (text/html)

POST bodies are JSON: {"quoteData": {...}, "ui": {...}, "f3Data": {...}}.
"""

import os
import logging
import functools

from flask import Blueprint, Response, current_app, jsonify, request

from ..core.errors import StructureError
from ..forms.placeholders import find_placeholders

log = logging.getLogger("blindquote.api")

bp = Blueprint("quote", __name__)

EXTENSION_KEY = "blindquote"


# ═══════════════════════════════════════════════════════════════════════
# Password Protection
# ═══════════════════════════════════════════════════════════════════════

def check_auth(username, password):
    return (username == os.environ.get("DASH_USER", "blindquote")
            and password == os.environ.get("DASH_PASS", "changeme"))


def auth_required(f):
    @functools.wraps(f)
    def decorated(*args, **kwargs):
        auth = request.authorization
        if not auth or not check_auth(auth.username, auth.password):
            return Response(
                "🔒 BlindQuote — Login Required",
                401, {"WWW-Authenticate": 'Basic realm="BlindQuote"'})
        return f(*args, **kwargs)
    return decorated


def _ext():
    return current_app.extensions[EXTENSION_KEY]


def _html(body):
    return Response(body, mimetype="text/html")


def _object(value):
    return value if isinstance(value, dict) else None


def _render_args():
    payload = _object(request.get_json(silent=True)) or {}
    return (_object(payload.get("quoteData")) or {},
            _object(payload.get("ui")), _object(payload.get("f3Data")))


# ═══════════════════════════════════════════════════════════════════════
# Routes
# ═══════════════════════════════════════════════════════════════════════

@bp.route("/api/health")
def api_health():
    store = _ext()["store"]
    return jsonify({"ok": True, "templates": store.state})


@bp.route("/api/quote/templates")
@auth_required
def api_template_status():
    store = _ext()["store"]
    status = store.status()
    for name, info in status["templates"].items():
        info["placeholders"] = find_placeholders(store.get(name)) if info["loaded"] else []
    return jsonify(status)


@bp.route("/api/quote/templates/reload", methods=["POST"])
@auth_required
def api_template_reload():
    store = _ext()["store"]
    state = store.initialize()
    log.info("Template reload requested → %s", state)
    return jsonify({"ok": state == "ready", "state": state})


@bp.route("/api/quote/preview", methods=["POST"])
@auth_required
def api_quote_preview():
    quote_data, ui, f3_data = _render_args()
    html = _ext()["service"].generate_quote_html(quote_data, ui, f3_data)
    if html is None:
        return jsonify({"ok": False, "error": "Quote templates are not loaded yet"}), 503
    return _html(html)


@bp.route("/api/quote/gmail", methods=["POST"])
@auth_required
def api_quote_gmail():
    quote_data, ui, f3_data = _render_args()
    html = _ext()["service"].generate_gmail_quote_html(quote_data, ui, f3_data)
    if html is None:
        return jsonify({"ok": False, "error": "Email template is not loaded yet"}), 503
    return _html(html)


@bp.app_errorhandler(StructureError)
def handle_structure_error(e):
    log.error("Template structure error on %s: %s", request.path, e,
              extra={"route": request.path})
    return jsonify({"ok": False, "error": str(e)}), 500
