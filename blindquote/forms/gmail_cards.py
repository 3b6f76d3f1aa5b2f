"""
Email ("GTH") summary cards.

Gmail and most mobile clients drop <style> blocks and mangle multi-column
tables, so each summary line becomes its own bordered presentation table
with every style inlined. Same lines and order as the print summary.
"""

from .price_format import format_price
from .quote_tables import summary_entries

CARD_BORDER = "#e0e0e0"
CARD_HEADER_BG = "#1a237e"


def _card_row(label, value, last=False) -> str:
    border = "" if last else f" border-bottom: 1px solid {CARD_BORDER};"
    return f"""
        <tr>
            <td style="padding: 10px 15px;{border}">
                <table border="0" cellpadding="0" cellspacing="0" width="100%">
                    <tr>
                        <td width="50%" valign="top" style="text-align: left; font-weight: 600;">{label}</td>
                        <td width="50%" valign="top" style="text-align: right;">{value}</td>
                    </tr>
                </table>
            </td>
        </tr>"""


def build_gmail_card(item_num, description, qty, price, discounted_price) -> str:
    """One card: header (number + description), then QTY / Price / Discounted Price."""
    return f"""
<table role="presentation" border="0" cellpadding="0" cellspacing="0" width="100%" style="border-collapse: collapse; margin-bottom: 15px; border: 1px solid {CARD_BORDER}; border-radius: 5px; box-shadow: 0 1px 3px rgba(0,0,0,0.05);">
    <tbody>
        <tr>
            <td style="padding: 10px 15px; border-bottom: 1px solid {CARD_BORDER}; background-color: {CARD_HEADER_BG}; color: white; border-radius: 4px 4px 0 0;">
                <table border="0" cellpadding="0" cellspacing="0" width="100%" style="color: white;">
                    <tr>
                        <td width="50%" valign="top" style="text-align: left; font-weight: bold;">{item_num}</td>
                        <td width="50%" valign="top" style="text-align: right; font-weight: normal;">{description}</td>
                    </tr>
                </table>
            </td>
        </tr>{_card_row("QTY", qty)}{_card_row("Price", price)}{_card_row("Discounted Price", discounted_price, last=True)}
    </tbody>
</table>
"""


def build_gmail_cards(template_data) -> str:
    """All summary cards for the email template's item list."""
    cards = []
    for e in summary_entries(template_data):
        # Original price is struck through for the blinds line and excluded fees;
        # only the blinds' discounted price is emphasized.
        price = format_price(e["price"], strikethrough=e["primary"] or e["excluded"])
        discounted = format_price(e["discounted"], discounted=e["primary"])
        cards.append(build_gmail_card(f"#{e['num']}", e["description"], e["qty"],
                                      price, discounted))
    return "".join(cards)
