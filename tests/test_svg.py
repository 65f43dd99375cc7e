"""Tests for SVG parsing."""

import pytest

from errors import ExtractionError
from utils.svg import parse_svg, parse_svg_file

from tests.conftest import svg_markup, write_svg


def test_parse_keeps_attributes_in_source_order():
    node = parse_svg('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16" fill="currentColor">'
                     '<path d="M1 1" fill-rule="evenodd"/></svg>')
    assert node.tag == "svg"
    assert list(node.attributes) == ["viewBox", "fill"]
    assert node.children[0].tag == "path"
    assert node.children[0].attributes == {"d": "M1 1", "fill-rule": "evenodd"}


def test_parse_drops_title_and_comments():
    node = parse_svg(svg_markup().replace("<path", "<!-- note --><path"))
    assert [child.tag for child in node.children] == ["path"]


def test_parse_keeps_xlink_prefix():
    node = parse_svg('<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">'
                     '<use xlink:href="#a"/></svg>')
    assert node.children[0].attributes == {"xlink:href": "#a"}


def test_parse_keeps_text_content():
    node = parse_svg('<svg xmlns="http://www.w3.org/2000/svg"><style>.a{fill:red}</style></svg>')
    assert node.children[0].text == ".a{fill:red}"


def test_parse_accepts_xml_declaration():
    node = parse_svg('<?xml version="1.0" encoding="UTF-8"?>\n' + svg_markup())
    assert node.tag == "svg"


def test_malformed_markup_raises():
    with pytest.raises(ExtractionError, match="malformed SVG"):
        parse_svg("<svg><path></svg>")


def test_non_svg_root_raises():
    with pytest.raises(ExtractionError, match="not <svg>"):
        parse_svg('<html xmlns="http://www.w3.org/1999/xhtml"/>')


def test_parse_file(tmp_path):
    path = write_svg(tmp_path / "icon.svg")
    assert parse_svg_file(path).children[0].attributes["d"] == "M0 0h24v24H0z"


def test_unreadable_file_raises(tmp_path):
    with pytest.raises(ExtractionError, match="could not read"):
        parse_svg_file(tmp_path / "missing.svg")


def test_parse_keeps_text_after_child_elements():
    node = parse_svg('<svg xmlns="http://www.w3.org/2000/svg"><text>a<tspan>b</tspan>c</text></svg>')
    text = node.children[0]
    assert text.text == "a"
    assert text.children[0].text == "b"
    assert text.children[0].tail == "c"


def test_parse_drops_editor_namespace_attributes():
    node = parse_svg('<svg xmlns="http://www.w3.org/2000/svg" '
                     'xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd">'
                     '<path d="M1 1" role="img" sodipodi:role="line"/></svg>')
    assert node.children[0].attributes == {"d": "M1 1", "role": "img"}
