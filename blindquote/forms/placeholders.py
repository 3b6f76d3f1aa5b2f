"""
Placeholder substitution — one flat find/replace pass.

Tokens are {{name}} or {{{name}}} (identical treatment). A token whose key is
missing, or maps to None, is left in the output exactly as written so gaps
in the data stay visible. Values are inserted as-is (no HTML escaping) and
the output is never re-scanned.
"""

import re

TOKEN_RE = re.compile(r"\{\{\{?([\w-]+)\}\}\}?", re.ASCII)


def _to_text(value) -> str:
    # Match the JSON producer: true/false, and 50.0 -> "50"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def populate_template(template: str, data) -> str:
    """Replace every known token in `template` with its value from `data`."""
    def _sub(match):
        value = data.get(match.group(1))
        if value is None:
            return match.group(0)
        return _to_text(value)

    return TOKEN_RE.sub(_sub, template)


substitute = populate_template


def find_placeholders(template: str) -> list:
    """Distinct token names in order of first appearance."""
    seen = []
    for name in TOKEN_RE.findall(template or ""):
        if name not in seen:
            seen.append(name)
    return seen
