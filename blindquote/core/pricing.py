"""
Pricing provider seam.

The quote calculation lives outside this package. Generation only needs an
object with get_quote_template_data(order, ui_state, extra) that returns the
flat template-data dict (items, summaryData, uiState, mulTimes, customer and
quote fields, totals).
"""

import logging

log = logging.getLogger("blindquote.pricing")


class PricingProvider:
    """Interface for whatever computes the quote's template data."""

    def get_quote_template_data(self, order, ui_state=None, extra=None) -> dict:
        raise NotImplementedError


class PassThroughPricingProvider(PricingProvider):
    """Uses an already-computed record as the template data.

    `order` is the computed record. `ui_state` is attached as uiState when
    the record has none. Keys from `extra` (customer / quote metadata) fill
    gaps but never override the record.
    """

    def get_quote_template_data(self, order, ui_state=None, extra=None) -> dict:
        data = dict(order or {})
        if ui_state is not None and data.get("uiState") is None:
            data["uiState"] = ui_state
        for key, value in (extra or {}).items():
            data.setdefault(key, value)
        data.setdefault("items", [])
        data.setdefault("summaryData", {})
        data.setdefault("uiState", {})
        log.debug("Template data prepared: %d items, %d keys",
                  len(data["items"]), len(data))
        return data
