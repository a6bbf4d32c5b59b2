"""Tests for building element trees from HTML text."""

from astext.models.node import Element
from astext.services.html_tree import ROOT_TAG, fragment, parse_html


def test_root_is_synthetic_document():
    root = parse_html("<p>x</p>")
    assert root.tag == ROOT_TAG
    assert root.children == [Element("p", ["x"])]


def test_void_elements_have_no_children():
    root = parse_html("<p>a<br>b</p>")
    assert root.children == [Element("p", ["a", Element("br"), "b"])]


def test_void_end_tag_ignored():
    root = parse_html("<br></br>x")
    assert root.children == [Element("br"), "x"]


def test_self_closing_tag():
    root = parse_html("<div/>x")
    assert root.children == [Element("div"), "x"]


def test_stray_end_tag_ignored():
    root = parse_html("a</div>b")
    assert root.children == ["a", "b"]


def test_end_tag_closes_inner_elements():
    root = parse_html("<div><span>x</div>y")
    assert root.children == [Element("div", [Element("span", ["x"])]), "y"]


def test_unclosed_elements_closed_at_end():
    root = parse_html("<div><span>one")
    assert root.children == [Element("div", [Element("span", ["one"])])]


def test_new_paragraph_closes_open_paragraph():
    root = parse_html("<p>a<p>b")
    assert root.children == [Element("p", ["a"]), Element("p", ["b"])]


def test_block_start_closes_open_paragraph():
    root = parse_html("<p>a<span>b<div>c</div>d")
    assert root.children == [
        Element("p", ["a", Element("span", ["b"])]),
        Element("div", ["c"]),
        "d",
    ]


def test_sibling_list_items_close_each_other():
    root = parse_html("<ul><li>one<li>two</ul>")
    assert root.children == [Element("ul", [Element("li", ["one"]), Element("li", ["two"])])]


def test_nested_list_items_stay_nested():
    root = parse_html("<ul><li>a<ul><li>b</ul><li>c</ul>")
    inner = Element("ul", [Element("li", ["b"])])
    assert root.children == [
        Element("ul", [Element("li", ["a", inner]), Element("li", ["c"])]),
    ]


def test_definition_terms_close_each_other():
    root = parse_html("<dl><dt>t<dd>d<dt>u</dl>")
    assert root.children == [
        Element("dl", [Element("dt", ["t"]), Element("dd", ["d"]), Element("dt", ["u"])]),
    ]


def test_table_closes_open_paragraph():
    root = parse_html("<p>a<table><td>x</td></table>")
    assert root.children[0] == Element("p", ["a"])
    assert root.children[1].tag == "table"


def test_tag_names_lowercased():
    root = parse_html("<P>x</P>")
    assert root.children[0].tag == "p"


def test_character_references_decoded():
    assert parse_html("a&amp;b&nbsp;").as_text() == "a&b\xa0"


def test_comments_and_doctype_dropped():
    assert parse_html("<!DOCTYPE html>a<!-- note -->b").as_text() == "ab"


def test_script_text_kept_in_tree():
    root = parse_html("<script>if (a < b) {}</script>")
    assert root.children[0].tag == "script"
    assert root.as_text() == "if (a < b) {}"


def test_fragment_wraps_siblings():
    tree = fragment("a", Element("br"), tag="body")
    assert tree == Element("body", ["a", Element("br")])
