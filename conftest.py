"""
Shared pytest fixtures for the BlindQuote test suite.

Templates are served from memory so tests never depend on the packaged
files or the network; test_template_store covers the real loaders.
"""
import os
import sys
import base64
import pytest

_PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from blindquote.core import paths
from blindquote.core.pricing import PassThroughPricingProvider
from blindquote.core.template_store import TemplateStore
from blindquote.forms.quote_html import QuoteGeneratorService


# ── Minimal templates ─────────────────────────────────────────────────────────

QUOTE_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>Quote {{quoteId}}</title></head>
<body>
<div class="customer">{{{customerInfoHtml}}}</div>
<table class="summary"><tbody>{{{itemsTableBody}}}</tbody></table>
<div class="total">Total: ${{grandTotal}}</div>
</body>
</html>"""

DETAILS_TEMPLATE = """<!DOCTYPE html>
<html>
<head><style>.bg-light-filter{background:#fff9c4}</style></head>
<body class="appendix">
<h2>Appendix {{quoteId}}</h2>
{{{rollerBlindsTable}}}
</body>
</html>"""

GMAIL_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>Quote {{quoteId}}</title></head>
<body>
<div>{{{customerInfoHtml}}}</div>
<div id="cards">{{{itemsTableBody}}}</div>
<table id="gth-summary-table"><tbody data-our-offer="{{ourOffer}}" data-total="{{grandTotal}}"></tbody></table>
</body>
</html>"""


@pytest.fixture
def templates():
    return {
        paths.QUOTE_TEMPLATE: QUOTE_TEMPLATE,
        paths.DETAILS_TEMPLATE: DETAILS_TEMPLATE,
        paths.GMAIL_TEMPLATE: GMAIL_TEMPLATE,
    }


@pytest.fixture
def store(templates):
    """Fully loaded in-memory template store."""
    return TemplateStore.from_strings(templates)


@pytest.fixture
def empty_store():
    """Store that has never been initialized."""
    return TemplateStore(loader=lambda name: "")


@pytest.fixture
def service(store):
    return QuoteGeneratorService(PassThroughPricingProvider(), store)


# ── Sample data factories ─────────────────────────────────────────────────────

@pytest.fixture
def sample_items():
    """Three valid blinds plus one with no height (must be dropped)."""
    return [
        {"width": 1200, "height": 1500, "fabric": "Light-Filter White", "fabricType": "LF",
         "color": "White", "location": "Lounge", "winder": "HD", "dual": "", "motor": "",
         "linePrice": 50},
        {"width": 900, "height": 1400, "fabric": "Sunscreen 5%", "fabricType": "SN",
         "color": "Charcoal", "location": "Kitchen", "winder": "", "dual": "D", "motor": "",
         "linePrice": 80.5},
        {"width": 1000, "height": "", "fabric": "Ghost Item", "fabricType": "B1",
         "color": "Black", "location": "Garage", "linePrice": 999},
        {"width": 1500, "height": 2100, "fabric": "Vista Blockout", "fabricType": "B3",
         "color": "Grey", "location": "Bed 1", "winder": "", "dual": "", "motor": "Y",
         "linePrice": 120},
    ]


@pytest.fixture
def sample_template_data(sample_items):
    """Template data as the pricing provider would return it."""
    return {
        "quoteId": "RB20261017-01",
        "issueDate": "2026-10-17",
        "customerName": "Jane Citizen",
        "customerAddress": "12 Example St\nBrisbane QLD 4000",
        "customerPhone": "0400 000 000",
        "customerEmail": "jane@example.com",
        "items": sample_items,
        "mulTimes": 1,
        "summaryData": {
            "firstRbPrice": 250.5,
            "disRbPrice": 200.4,
            "acceSum": 0,
            "eAcceSum": 0,
            "deliveryFee": 40,
            "installFee": 60,
            "removalFee": 20,
        },
        "uiState": {"f2": {"deliveryQty": 1, "removalQty": 2}},
        "ourOffer": 320.4,
        "grandTotal": 352.44,
    }


# ── Flask test client ─────────────────────────────────────────────────────────

def _basic_auth_header(user="blindquote", pw="changeme"):
    creds = base64.b64encode(f"{user}:{pw}".encode()).decode()
    return {"Authorization": f"Basic {creds}"}


class AuthenticatedClient:
    """Wraps Flask test client to add Basic Auth headers to every request."""
    def __init__(self, client, headers):
        self._client = client
        self._headers = headers

    def get(self, *args, **kwargs):
        kwargs.setdefault("headers", {}).update(self._headers)
        return self._client.get(*args, **kwargs)

    def post(self, *args, **kwargs):
        kwargs.setdefault("headers", {}).update(self._headers)
        return self._client.post(*args, **kwargs)


@pytest.fixture
def app(store, monkeypatch):
    """Flask app wired to the in-memory store."""
    monkeypatch.setenv("DASH_USER", "blindquote")
    monkeypatch.setenv("DASH_PASS", "changeme")
    from app import create_app
    _app = create_app(store=store)
    _app.config["TESTING"] = True
    return _app


@pytest.fixture
def client(app):
    """Authenticated Flask test client (HTTP Basic Auth on every request)."""
    with app.test_client() as c:
        yield AuthenticatedClient(c, _basic_auth_header())


@pytest.fixture
def anon_client(app):
    """Unauthenticated test client."""
    with app.test_client() as c:
        yield c
