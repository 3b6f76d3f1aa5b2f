"""Tests for blindquote.forms.assembler: style/body splice and control injection."""
import pytest

from blindquote.core.errors import StructureError
from blindquote.forms.assembler import (
    extract_details_parts, insert_before, assemble_detailed_document,
    assemble_gmail_document,
)
from blindquote.forms.fragments import ACTION_BAR_HTML, PRINT_SCRIPT_HTML, GMAIL_SCRIPT_HTML

PRIMARY = "<html><head><title>{{quoteId}}</title></head><body><h1>{{quoteId}}</h1></body></html>"
DETAILS = ("<html><head><style>.x{color:red}</style></head>"
           "<BODY class='appendix'><p>{{quoteId}}</p>{{{table}}}</BODY></html>")


class TestExtractDetailsParts:

    def test_style_and_body(self):
        style, body = extract_details_parts(DETAILS)
        assert style == "<style>.x{color:red}</style>"
        assert body == "<p>{{quoteId}}</p>{{{table}}}"

    def test_no_style(self):
        style, body = extract_details_parts("<body>x</body>")
        assert style == ""
        assert body == "x"

    def test_empty_body_is_not_an_error(self):
        assert extract_details_parts("<body></body>") == ("", "")

    def test_missing_body_raises(self):
        with pytest.raises(StructureError):
            extract_details_parts("<html><style>a{}</style><div>no body</div></html>")


class TestInsertBefore:

    def test_last_occurrence_case_insensitive(self):
        assert insert_before("a</BODY>b</body>", "</body>", "X") == "a</BODY>bX</body>"

    def test_absent(self):
        assert insert_before("<div></div>", "</body>", "X") is None


class TestAssembleDetailed:

    def test_full_merge(self):
        html = assemble_detailed_document(PRIMARY, DETAILS, {"quoteId": "Q1", "table": "<table/>"})
        assert "<style>.x{color:red}</style></head>" in html
        assert "<h1>Q1</h1><p>Q1</p><table/>" in html
        assert html.index("<body>") < html.index(ACTION_BAR_HTML)
        assert f"<body>{ACTION_BAR_HTML}" in html
        assert f"{PRINT_SCRIPT_HTML}</body>" in html
        assert "{{" not in html

    def test_unknown_tokens_survive(self):
        html = assemble_detailed_document(PRIMARY, DETAILS, {"table": ""})
        assert "<h1>{{quoteId}}</h1>" in html
        assert "<p>{{quoteId}}</p>" in html

    def test_details_without_body_raises(self):
        with pytest.raises(StructureError):
            assemble_detailed_document(PRIMARY, "<html><p>oops</p></html>", {})

    def test_primary_without_closing_body_raises(self):
        with pytest.raises(StructureError):
            assemble_detailed_document("<html><head></head><body>", DETAILS, {})

    def test_primary_without_head_skips_style(self):
        html = assemble_detailed_document("<body>x</body>", DETAILS, {"quoteId": "Q"})
        assert "<style>" not in html
        assert "<p>Q</p>" in html

    def test_body_with_attributes_gets_action_bar(self):
        primary = '<html><head></head><body class="quote">x</body></html>'
        html = assemble_detailed_document(primary, DETAILS, {})
        assert f'<body class="quote">{ACTION_BAR_HTML}x' in html


class TestAssembleGmail:

    def test_populate_and_inject(self):
        html = assemble_gmail_document("<html><body>{{{cards}}}</body></html>", {"cards": "<table/>"})
        assert html == f"<html><body><table/>{GMAIL_SCRIPT_HTML}</body></html>"

    def test_no_action_bar_from_print_flow(self):
        html = assemble_gmail_document("<body></body>", {})
        assert ACTION_BAR_HTML not in html
        assert "btn-copy-gth" in html

    def test_missing_closing_body_appends(self):
        html = assemble_gmail_document("<div>{{x}}</div>", {"x": 1})
        assert html == "<div>1</div>" + GMAIL_SCRIPT_HTML
