"""Quote HTML rendering.

Key exports:
    QuoteGeneratorService   — detailed and email quote entry points
    populate_template()     — flat {{placeholder}} substitution
    format_price()          — $0.00 text, struck-through or discounted
    build_items_table()     — appendix table of valid blinds
    build_summary_rows()    — page-one summary rows
    build_gmail_cards()     — email-safe summary cards
"""

from .price_format import format_price
from .placeholders import populate_template
from .quote_tables import build_items_table, build_summary_rows
from .gmail_cards import build_gmail_cards
from .quote_html import QuoteGeneratorService
