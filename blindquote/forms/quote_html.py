"""
Quote HTML generator — the two entry points the app calls.

    generate_quote_html()        — detailed, printable quote (quote + appendix)
    generate_gmail_quote_html()  — compact email summary with item cards

Both return None (and log) when their templates are not loaded.
StructureError from a broken template asset propagates to the caller.
"""

import logging
import time

from ..core import paths
from ..core.errors import TemplateNotReadyError
from .assembler import assemble_detailed_document, assemble_gmail_document
from .gmail_cards import build_gmail_cards
from .quote_tables import (build_items_table, build_summary_rows,
                           format_customer_info, valid_items)

log = logging.getLogger("blindquote.quote")


class QuoteGeneratorService:
    """Renders quotes from pricing-provider data and cached templates."""

    def __init__(self, pricing_provider, template_store):
        self.pricing_provider = pricing_provider
        self.template_store = template_store

    def _templates(self, *names):
        try:
            return [self.template_store.get(n) for n in names]
        except TemplateNotReadyError as e:
            log.error("Quote generation skipped: %s", e, extra={"template": e.name})
            return None

    def generate_quote_html(self, quote_data, ui=None, f3_data=None):
        """Full printable quote, or None if its templates are not loaded."""
        templates = self._templates(paths.QUOTE_TEMPLATE, paths.DETAILS_TEMPLATE)
        if templates is None:
            return None
        quote_template, details_template = templates
        t0 = time.time()

        template_data = self.pricing_provider.get_quote_template_data(quote_data, ui, f3_data)
        populated = {
            **template_data,
            "customerInfoHtml": format_customer_info(template_data),
            "itemsTableBody": build_summary_rows(template_data),
            "rollerBlindsTable": build_items_table(template_data),
        }
        html = assemble_detailed_document(quote_template, details_template, populated)

        log.info("Detailed quote rendered (%d chars, %.0fms)", len(html),
                 (time.time() - t0) * 1000,
                 extra={"items": len(valid_items(template_data.get("items")))})
        return html

    def generate_gmail_quote_html(self, quote_data, ui=None, f3_data=None):
        """Email-safe quote summary, or None if the email template is not loaded."""
        templates = self._templates(paths.GMAIL_TEMPLATE)
        if templates is None:
            return None
        gmail_template, = templates

        template_data = self.pricing_provider.get_quote_template_data(quote_data, ui, f3_data)
        populated = {
            **template_data,
            "customerInfoHtml": format_customer_info(template_data),
            "itemsTableBody": build_gmail_cards(template_data),
        }
        html = assemble_gmail_document(gmail_template, populated)

        log.info("Email quote rendered (%d chars)", len(html),
                 extra={"items": len(valid_items(template_data.get("items")))})
        return html
