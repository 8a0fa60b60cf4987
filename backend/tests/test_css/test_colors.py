"""Tests for color extraction and mono/multi classification."""

from __future__ import annotations

import pytest

from iconforge.css.sheet import ColorUsage, classify_colors, is_multi_color
from iconforge.svg.colors import color_tokens, concrete_colors, normalize_color
from tests.conftest import CURRENT_COLOR_SVG, MULTI_COLOR_SVG, STROKE_SVG


@pytest.mark.parametrize(
    "value,expected",
    [
        ("#ABC", "#aabbcc"),
        ("#aabbccff", "#aabbcc"),
        ("Red", "#ff0000"),
        ("rgb(0, 0, 0)", "rgb(0,0,0)"),
        ("currentColor", None),
        ("none", None),
        ("url(#grad)", None),
        ("var(--brand)", None),
    ],
)
def test_normalize_color(value, expected):
    assert normalize_color(value) == expected


def test_tokens_from_attributes_and_styles():
    markup = '<svg><style>.a { fill: #111; }</style><path style="stroke: #222" fill="#333"/></svg>'
    assert color_tokens(markup) == ["#111", "#222", "#333"]


def test_same_color_in_two_spellings_is_one():
    assert concrete_colors('<svg><path fill="#fff"/><path fill="#FFFFFF"/><path fill="white"/></svg>') == ["#ffffff"]


def test_stroke_width_is_not_a_color():
    assert concrete_colors('<svg><path stroke-width="2" d="M0 0"/></svg>') == []


def test_current_color_only_is_mono():
    assert classify_colors(CURRENT_COLOR_SVG) == ColorUsage.MONO


def test_stroke_icon_is_mono():
    assert not is_multi_color(STROKE_SVG)


def test_two_distinct_hex_fills_is_multi():
    assert classify_colors(MULTI_COLOR_SVG) == ColorUsage.MULTI


def test_single_concrete_color_is_mono():
    assert classify_colors('<svg><path fill="#e11d48" d="M0 0"/></svg>') == ColorUsage.MONO
