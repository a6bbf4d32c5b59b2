"""Tests for the HTML-to-text pipeline."""

from astext.models.options import ZWSP
from astext.services.html_extract import html_to_text

SAMPLE_HTML = (
    "<html><head><title>Test Page</title>"
    "<script>var x = 1;</script>"
    "<style>.hidden { display: none; }</style></head>"
    "<body><h1>Welcome</h1>"
    "<p>This is a <strong>test</strong> page.</p>"
    "<div>Another paragraph.</div></body></html>"
)


def test_html_to_text_basic():
    result = html_to_text(SAMPLE_HTML, lf_char="\n", zwsp_char="")
    assert result == "Test PageWelcome\nThis is a test page.\nAnother paragraph.\n"


def test_html_to_text_marks_inline_boundaries():
    result = html_to_text(SAMPLE_HTML, lf_char="\n")
    assert f"This is a test{ZWSP} page.\n" in result
    assert "var x = 1" not in result
    assert ".hidden" not in result


def test_browser_like_line_breaks():
    html = "<p><span>AAA</span>BBB</p><h2>CCC</h2>DDD<br>EEE"
    assert html_to_text(html, lf_char="\n") == f"AAA{ZWSP}BBB\nCCC\nDDD\nEEE{ZWSP}"


def test_inline_without_separator():
    assert html_to_text("<p><span>A</span>pple</p>", lf_char="\n", zwsp_char="") == "Apple\n"


def test_skip_dels():
    html = "<p>price <del>$10</del><ins>$8</ins></p>"
    assert html_to_text(html, lf_char="\n", zwsp_char="") == "price $10\n$8\n\n"
    assert html_to_text(html, lf_char="\n", zwsp_char="", skip_dels=True) == "price $8\n\n"


def test_trim_and_nbsp():
    html = "\n  <div>&nbsp;Hello&nbsp;world&nbsp;</div>\n"
    assert html_to_text(html, lf_char="\n", zwsp_char="", trim=True) == "Hello world"


def test_html_to_text_empty():
    assert html_to_text("") == ZWSP
    assert html_to_text("", trim=True) == ZWSP
    assert html_to_text("", zwsp_char="") == ""


def test_html_to_text_plain_text():
    assert html_to_text("just plain text", zwsp_char="") == "just plain text"


def test_unclosed_paragraphs_break_lines():
    assert html_to_text("<p>a<p>b", lf_char="\n", zwsp_char="") == "a\nb\n"
    assert html_to_text("<ul><li>a<li>b</ul>", lf_char="\n", zwsp_char="") == "a\nb\n\n"
