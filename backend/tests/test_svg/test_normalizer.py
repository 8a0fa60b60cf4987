"""Tests for SVG normalization: namespace repair, cleanup, extraction."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from iconforge.svg.normalizer import (
    DEFAULT_VIEW_BOX,
    PLACEHOLDER_NAME,
    clean,
    ensure_namespace,
    extract_attributes,
    extract_body,
    extract_name,
    view_box_or_default,
)
from iconforge.svg.xmltree import SVG_NS, try_parse
from tests.conftest import (
    ADOBE_SVG,
    AFFINITY_SVG,
    HOME_SVG,
    INKSCAPE_SVG,
    MALFORMED_SVG,
    MULTI_COLOR_SVG,
    STROKE_SVG,
)


SAMPLES = [HOME_SVG, STROKE_SVG, MULTI_COLOR_SVG, INKSCAPE_SVG, AFFINITY_SVG, ADOBE_SVG, MALFORMED_SVG]


class TestEnsureNamespace:
    def test_adds_missing_namespace(self):
        result = ensure_namespace(HOME_SVG)
        assert result.startswith(f'<svg xmlns="{SVG_NS}"')
        assert try_parse(result).tag == f"{{{SVG_NS}}}svg"

    def test_keeps_correct_namespace_untouched(self):
        assert ensure_namespace(STROKE_SVG) == STROKE_SVG

    def test_replaces_wrong_namespace(self):
        result = ensure_namespace('<svg xmlns="http://example.com/other" viewBox="0 0 1 1"/>')
        assert f'xmlns="{SVG_NS}"' in result
        assert "example.com" not in result

    def test_malformed_markup_gets_one_declaration(self):
        result = ensure_namespace(MALFORMED_SVG)
        assert result.count("xmlns=") == 1
        assert f'xmlns="{SVG_NS}"' in result

    def test_malformed_duplicate_declarations_collapse(self):
        text = '<svg xmlns="http://example.com/a" xmlns="http://example.com/b"><g></svg>'
        result = ensure_namespace(text)
        assert result.count("xmlns=") == 1

    @pytest.mark.parametrize("markup", SAMPLES)
    def test_idempotent(self, markup):
        once = ensure_namespace(markup)
        assert ensure_namespace(once) == once

    def test_non_svg_input_returned_as_is(self):
        assert ensure_namespace("hello") == "hello"
        assert ensure_namespace("") == ""


class TestClean:
    def test_strips_editor_noise(self):
        result = clean(INKSCAPE_SVG)
        for fragment in ("<?xml", "<!--", "metadata", "sodipodi", "inkscape", "data-name", "version="):
            assert fragment not in result
        assert 'viewBox="0 0 32 32"' in result
        assert "<path" in result

    @pytest.mark.parametrize("markup", [AFFINITY_SVG, ADOBE_SVG], ids=["affinity", "illustrator"])
    def test_drops_foreign_namespaces(self, markup):
        result = clean(markup)
        for fragment in ("serif", "i:", "ns0", "ns1", "xml:space"):
            assert fragment not in result
        # The body must stand on its own once the root is cut away
        assert try_parse(f"<g>{extract_body(result)}</g>") is not None

    def test_keeps_xlink(self):
        markup = (
            '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
            'xmlns:bx="https://boxy-svg.com"><use xlink:href="#a" bx:origin="0 0"/></svg>'
        )
        result = clean(markup)
        assert 'xlink:href="#a"' in result
        assert "bx" not in result

    def test_result_still_parses(self):
        assert try_parse(clean(INKSCAPE_SVG)) is not None

    def test_collapses_whitespace(self):
        result = clean('<svg viewBox="0 0 24 24">\n\n   <path   d="M1\n   1h22"/>\n</svg>')
        assert "\n" not in result
        assert 'd="M1 1h22"' in result

    @pytest.mark.parametrize("markup", SAMPLES)
    def test_idempotent(self, markup):
        once = clean(markup)
        assert clean(once) == once

    def test_malformed_input_degrades_without_raising(self):
        result = clean(MALFORMED_SVG)
        assert "<!--" not in result
        assert '<path d="M1 1h22"/>' in result

    def test_empty(self):
        assert clean("") == ""


class TestExtraction:
    def test_extract_body(self):
        assert extract_body(HOME_SVG) == '<path d="M12 2L2 7"/>'

    def test_extract_body_self_closing_root(self):
        assert extract_body('<svg viewBox="0 0 1 1"/>') == ""

    def test_extract_body_drops_embedded_animation(self):
        from iconforge.svg.animation import embed

        body = extract_body(embed(HOME_SVG, "spin"))
        assert "<style" not in body
        assert "M12 2L2 7" in body

    def test_extract_attributes(self):
        attrs = extract_attributes(STROKE_SVG)
        assert attrs == {"width": "24", "height": "24", "viewBox": "0 0 24 24"}

    def test_extract_attributes_malformed(self):
        assert extract_attributes(MALFORMED_SVG) == {"viewBox": "0 0 24 24"}

    def test_view_box_precedence(self):
        assert view_box_or_default(HOME_SVG, "0 0 48 48") == "0 0 24 24"
        assert view_box_or_default("<svg/>", "0 0 48 48") == "0 0 48 48"
        assert view_box_or_default("<svg/>") == DEFAULT_VIEW_BOX


class TestExtractName:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("icons/arrow-left.svg", "arrow-left"),
            ("C:\\icons\\Arrow Left.SVG", "arrow-left"),
            ("/tmp/home.min.svg", "home"),
            ("assets/icon_close.svg", "icon-close"),
        ],
    )
    def test_from_paths(self, value, expected):
        assert extract_name(value) == expected

    def test_non_path_yields_placeholder(self):
        assert extract_name('<svg id="rocket"><title>Rocket</title></svg>') == PLACEHOLDER_NAME
        assert extract_name("") == PLACEHOLDER_NAME


def test_clean_output_is_svg_namespaced_once_normalized():
    root = ET.fromstring(ensure_namespace(clean(HOME_SVG)))
    assert root.tag == f"{{{SVG_NS}}}svg"
