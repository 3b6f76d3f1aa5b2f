"""
Quote rendering errors.

TemplateNotReadyError is a soft failure: generation entry points catch it,
log it and return None. StructureError is hard and always propagates.
"""


class QuoteRenderError(Exception):
    """Base class for quote rendering failures."""


class TemplateNotReadyError(QuoteRenderError):
    """A required template has not been loaded (yet, or ever)."""

    def __init__(self, name, state=None):
        self.name = name
        self.state = state
        msg = f"Template '{name}' is not loaded"
        if state:
            msg += f" (store state: {state})"
        super().__init__(msg)


class StructureError(QuoteRenderError):
    """A template asset is missing a structural element (e.g. <body>)."""
