"""
Document assembly for the two quote formats.

Detailed quote: the appendix template is populated on its own, its <style>
block and <body> contents are lifted into the primary quote template, the
combined page is populated again, then the action bar and print script are
injected. Email quote: one template, populated, plus the copy/GST script.
"""

import re
import logging
from typing import Optional

from ..core.errors import StructureError
from .fragments import ACTION_BAR_HTML, PRINT_SCRIPT_HTML, GMAIL_SCRIPT_HTML
from .placeholders import populate_template

log = logging.getLogger("blindquote.assembler")

STYLE_RE = re.compile(r"<style>([\s\S]*)</style>", re.IGNORECASE)
BODY_RE = re.compile(r"<body[^>]*>([\s\S]*)</body>", re.IGNORECASE)
BODY_OPEN_RE = re.compile(r"<body[^>]*>", re.IGNORECASE)
HEAD_CLOSE = "</head>"
BODY_CLOSE = "</body>"


def extract_details_parts(html: str):
    """Return (style_block, body_inner) from a populated appendix page.

    style_block is the whole <style>…</style> element, or "" if there is none.
    Raises StructureError when no <body>…</body> can be found.
    """
    body = BODY_RE.search(html)
    if not body:
        raise StructureError("Could not find body content in the details template.")
    style = STYLE_RE.search(html)
    return (style.group(0) if style else ""), body.group(1)


def insert_before(html: str, tag: str, fragment: str) -> Optional[str]:
    """Insert fragment before the last `tag` (case-insensitive), None if absent."""
    matches = list(re.finditer(re.escape(tag), html, re.IGNORECASE))
    if not matches:
        return None
    pos = matches[-1].start()
    return html[:pos] + fragment + html[pos:]


def insert_after_body_open(html: str, fragment: str) -> str:
    match = BODY_OPEN_RE.search(html)
    if not match:
        log.warning("No opening <body> tag; action bar not injected")
        return html
    return html[:match.end()] + fragment + html[match.end():]


def assemble_detailed_document(primary: str, details: str, data) -> str:
    """Merge appendix into the primary template and add print controls."""
    populated_details = populate_template(details, data)
    style_block, body_content = extract_details_parts(populated_details)

    merged = insert_before(primary, HEAD_CLOSE, style_block)
    if merged is None:
        log.warning("Primary quote template has no </head>; appendix styles dropped")
        merged = primary
    merged = insert_before(merged, BODY_CLOSE, body_content)
    if merged is None:
        raise StructureError("Could not find </body> in the primary quote template.")

    merged = populate_template(merged, data)
    merged = insert_after_body_open(merged, ACTION_BAR_HTML)
    return insert_before(merged, BODY_CLOSE, PRINT_SCRIPT_HTML)


def assemble_gmail_document(template: str, data) -> str:
    """Populate the email template and add the copy / GST-toggle controls."""
    populated = populate_template(template, data)
    final = insert_before(populated, BODY_CLOSE, GMAIL_SCRIPT_HTML)
    if final is None:
        log.warning("Email template has no </body>; controls appended at end")
        final = populated + GMAIL_SCRIPT_HTML
    return final
