"""
Quote table builders for the detailed (print / PDF) quote.

    build_items_table()     — appendix: one row per valid blind
    build_summary_rows()    — page-one summary rows (blinds, accessories, fees)
    summary_entries()       — the ordered summary line items, shared with the
                              email card builder so both formats agree
    format_customer_info()  — customer name / address / contact block
"""

import html
import logging

from .price_format import to_amount, money

log = logging.getLogger("blindquote.tables")

ITEM_HEADERS = ["#", "F-NAME", "F-COLOR", "Location", "HD", "Dual", "Motor", "Price"]
ITEM_COL_WIDTHS = ["5%", "20%", "15%", "12%", "9%", "9%", "9%", "13%"]
BLOCKOUT_TYPES = ("B1", "B2", "B3", "B4", "B5")
CHECK = "✔"

# (description, summaryData fee key, uiState.f2 exclusion flag)
FEES = [
    ("Delivery", "deliveryFee", "deliveryFeeExcluded"),
    ("Installation", "installFee", "installFeeExcluded"),
    ("Removal", "removalFee", "removalFeeExcluded"),
]


def _esc(value) -> str:
    if value is None:
        return ""
    return html.escape(str(value), quote=False)


def valid_items(items) -> list:
    """Items with both width and height set; everything else is dropped."""
    return [i for i in (items or []) if i.get("width") and i.get("height")]


def fabric_class(item) -> str:
    """Row styling by fabric: light-filter name, then screen, then blockout."""
    fabric = str(item.get("fabric") or "")
    fabric_type = item.get("fabricType")
    if "light-filter" in fabric.lower():
        return "bg-light-filter"
    if fabric_type == "SN":
        return "bg-screen"
    if fabric_type in BLOCKOUT_TYPES:
        return "bg-blockout"
    return ""


def _cell(label, content, css_class="") -> str:
    classes = f"{css_class} {'is-empty-cell' if not content else ''}".strip()
    return f'<td data-label="{label}" class="{classes}">{content}</td>'


# ═══════════════════════════════════════════════════════════════════════════════
# Appendix — Roller Blinds Detailed List
# ═══════════════════════════════════════════════════════════════════════════════

def build_items_table(template_data) -> str:
    """Full <table> for the appendix page, one row per valid item."""
    items = valid_items(template_data.get("items"))
    multiplier = template_data.get("mulTimes")
    if multiplier is None:
        log.warning("mulTimes missing from template data; appendix prices will be $0.00")
    multiplier = to_amount(multiplier)

    rows = []
    for index, item in enumerate(items, start=1):
        fab_class = fabric_class(item)
        final_price = to_amount(item.get("linePrice")) * multiplier
        cells = "".join([
            _cell("#", index, "text-center"),
            _cell("F-NAME", _esc(item.get("fabric")), fab_class),
            _cell("F-COLOR", _esc(item.get("color")), fab_class),
            _cell("Location", _esc(item.get("location"))),
            _cell("HD", CHECK if item.get("winder") == "HD" else "", "text-center"),
            _cell("Dual", CHECK if item.get("dual") == "D" else "", "text-center"),
            _cell("Motor", CHECK if item.get("motor") else "", "text-center"),
            _cell("Price", money(final_price), "text-right"),
        ])
        rows.append(f"<tr>{cells}</tr>")

    cols = "\n".join(f'        <col style="width: {w};">' for w in ITEM_COL_WIDTHS)
    headers = "".join(f"<th>{h}</th>" for h in ITEM_HEADERS)
    body = "\n".join(f"        {r}" for r in rows)
    return f"""
<table class="detailed-list-table">
    <colgroup>
{cols}
    </colgroup>
    <thead>
        <tr class="table-title">
            <th colspan="{len(ITEM_HEADERS)}">Roller Blinds - Detailed List</th>
        </tr>
        <tr>{headers}</tr>
    </thead>
    <tbody>
{body}
    </tbody>
</table>
"""


# ═══════════════════════════════════════════════════════════════════════════════
# Page-one summary
# ═══════════════════════════════════════════════════════════════════════════════

def summary_entries(template_data) -> list:
    """Ordered summary line items, numbered from 1.

    Each entry: {num, description, qty, price, discounted, primary, excluded}.
    Accessory lines appear only when their sum is positive; the three fee
    lines always appear. An excluded fee keeps its price but its discounted
    value is 0. Fees are not discounted otherwise.
    """
    summary = template_data.get("summaryData") or {}
    f2 = (template_data.get("uiState") or {}).get("f2") or {}
    item_count = len(valid_items(template_data.get("items")))

    entries = [{
        "description": "Roller Blinds",
        "qty": item_count,
        "price": to_amount(summary.get("firstRbPrice")),
        "discounted": to_amount(summary.get("disRbPrice")),
        "primary": True,
        "excluded": False,
    }]

    for description, key in (("Installation Accessories", "acceSum"),
                             ("Motorised Accessories", "eAcceSum")):
        amount = to_amount(summary.get(key))
        if amount > 0:
            entries.append({"description": description, "qty": "NA",
                            "price": amount, "discounted": amount,
                            "primary": False, "excluded": False})

    fee_qty = {
        "Delivery": f2.get("deliveryQty") or 1,
        "Installation": item_count,
        "Removal": f2.get("removalQty") or 0,
    }
    for description, fee_key, flag in FEES:
        fee = to_amount(summary.get(fee_key))
        excluded = bool(f2.get(flag))
        entries.append({"description": description, "qty": fee_qty[description],
                        "price": fee, "discounted": 0.0 if excluded else fee,
                        "primary": False, "excluded": excluded})

    for num, entry in enumerate(entries, start=1):
        entry["num"] = num
    return entries


def build_summary_rows(template_data) -> str:
    """<tr> rows for the page-one summary table (tbody contents)."""
    rows = []
    for e in summary_entries(template_data):
        if e["primary"]:
            price = f'<span class="original-price">{money(e["price"])}</span>'
            discounted = f'<span class="discounted-price">{money(e["discounted"])}</span>'
        else:
            price = money(e["price"])
            discounted = money(e["discounted"])
        price_class = "align-right is-excluded" if e["excluded"] else "align-right"
        rows.append(
            "<tr>"
            f'<td data-label="NO">{e["num"]}</td>'
            f'<td data-label="Description" class="description">{e["description"]}</td>'
            f'<td data-label="QTY" class="align-right">{_esc(e["qty"])}</td>'
            f'<td data-label="Price" class="{price_class}">{price}</td>'
            f'<td data-label="Discounted Price" class="align-right">{discounted}</td>'
            "</tr>"
        )
    return "\n".join(rows)


# ═══════════════════════════════════════════════════════════════════════════════
# Customer block
# ═══════════════════════════════════════════════════════════════════════════════

def format_customer_info(template_data) -> str:
    out = f"<strong>{_esc(template_data.get('customerName'))}</strong><br>"
    address = template_data.get("customerAddress")
    if address:
        out += _esc(address).replace("\n", "<br>") + "<br>"
    if template_data.get("customerPhone"):
        out += f"Phone: {_esc(template_data['customerPhone'])}<br>"
    if template_data.get("customerEmail"):
        out += f"Email: {_esc(template_data['customerEmail'])}"
    return out
