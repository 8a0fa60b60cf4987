"""Tests for the animation codec: embed, detect, clean."""

from __future__ import annotations

import pytest

from iconforge.models.icon import AnimationSpec
from iconforge.svg.animation import (
    SCRIPT_ID,
    STYLE_ID,
    build_css,
    clean,
    default_spec,
    detect,
    embed,
    has_animation,
    keyframes_for,
    parse_css,
    preset_names,
)
from iconforge.svg.normalizer import extract_body
from iconforge.svg.xmltree import try_parse
from tests.conftest import HOME_SVG, MALFORMED_SVG, STROKE_SVG


class TestPresets:
    def test_core_vocabulary_present(self):
        names = preset_names()
        for name in ("spin", "pulse", "bounce", "shake", "fade", "draw", "draw-loop"):
            assert name in names

    def test_draw_defaults_run_once(self):
        spec = default_spec("draw")
        assert spec.iteration == 1
        assert spec.duration == 2.0

    def test_draw_loop_repeats(self):
        assert default_spec("draw-loop").iteration == "infinite"

    def test_custom_keyframes(self):
        rule = keyframes_for("wiggle", "from { opacity: 0; } to { opacity: 1; }")
        assert rule.startswith("@keyframes wiggle {")
        assert "opacity: 0" in rule


class TestEmbed:
    def test_embeds_tagged_style(self):
        result = embed(HOME_SVG, "spin")
        assert f'id="{STYLE_ID}"' in result
        assert "@keyframes spin" in result
        assert try_parse(result) is not None

    def test_draw_adds_path_length_script(self):
        result = embed(STROKE_SVG, "draw")
        assert f'id="{SCRIPT_ID}"' in result
        assert "stroke-dasharray" in result

    def test_replaces_existing_animation(self):
        result = embed(embed(HOME_SVG, "spin"), "pulse")
        assert "@keyframes pulse" in result
        assert "@keyframes spin" not in result
        assert result.count(STYLE_ID) == 1

    def test_spec_overrides_defaults(self):
        spec = AnimationSpec(type="bounce", duration=0.5, timing="linear", iteration=3, direction="alternate")
        result = embed(HOME_SVG, "bounce", spec)
        assert "animation: bounce 0.5s linear 3 alternate" in result

    def test_malformed_markup_uses_fallback(self):
        result = embed(MALFORMED_SVG, "spin")
        assert f'<style id="{STYLE_ID}">' in result
        assert detect(result).type == "spin"

    def test_empty_input(self):
        assert embed("", "spin") == ""


class TestDetect:
    @pytest.mark.parametrize("name", ["spin", "pulse", "shake", "draw", "draw-loop", "heartbeat"])
    def test_round_trip_type(self, name):
        spec = detect(embed(STROKE_SVG, name))
        assert spec is not None
        assert spec.type == name
        assert spec == default_spec(name)

    def test_full_spec_round_trip(self):
        spec = AnimationSpec(type="fade", duration=1.5, timing="ease-in", iteration=2, direction="reverse", delay=0.25)
        assert detect(embed(HOME_SVG, "fade", spec)) == spec

    def test_custom_animation_keeps_keyframes(self):
        spec = AnimationSpec(type="wiggle", keyframes="0% { transform: rotate(-3deg); } 100% { transform: rotate(3deg); }")
        found = detect(embed(HOME_SVG, "wiggle", spec))
        assert found.type == "wiggle"
        assert "rotate(-3deg)" in found.keyframes

    def test_legacy_untagged_style(self):
        markup = (
            '<svg viewBox="0 0 24 24"><style>@keyframes spin { to { transform: rotate(360deg); } } '
            "svg { animation: spin 3s linear infinite normal; }</style><path d=\"M1 1\"/></svg>"
        )
        spec = detect(markup)
        assert spec.type == "spin"
        assert spec.duration == 3.0

    def test_no_animation(self):
        assert detect(HOME_SVG) is None
        assert not has_animation(STROKE_SVG)

    def test_parse_css_unreadable_returns_none(self):
        assert parse_css("svg { color: red; }") is None


class TestClean:
    def test_removes_embedded_animation(self):
        animated = embed(STROKE_SVG, "draw")
        cleaned = clean(animated)
        assert STYLE_ID not in cleaned
        assert SCRIPT_ID not in cleaned
        assert not has_animation(cleaned)

    def test_body_survives_embed_and_clean(self):
        assert extract_body(clean(embed(HOME_SVG, "pulse"))) == extract_body(clean(embed(HOME_SVG, "spin")))

    def test_unanimated_markup_unchanged(self):
        assert clean(STROKE_SVG) == STROKE_SVG

    def test_unwraps_legacy_wrapper_group(self):
        markup = '<svg viewBox="0 0 24 24"><g class="iconforge-anim-spin"><path d="M1 1"/></g></svg>'
        cleaned = clean(markup)
        assert "<g" not in cleaned
        assert '<path d="M1 1" />' in cleaned

    def test_malformed_wrapper_unwrapped_by_fallback(self):
        markup = '<svg><g class="iconforge-anim-spin"><path d="M1 1"/></g><g></svg>'
        assert "iconforge-anim" not in clean(markup)

    def test_keeps_unrelated_style(self):
        markup = '<svg viewBox="0 0 24 24"><style>.a { fill: red; }</style><path class="a" d="M1 1"/></svg>'
        assert ".a { fill: red; }" in clean(markup)

    def test_removes_legacy_untagged_style(self):
        markup = (
            '<svg viewBox="0 0 24 24"><style>@keyframes spin { to { transform: rotate(360deg); } } '
            'svg { animation: spin 3s linear infinite normal; }</style><path d="M1 1"/></svg>'
        )
        cleaned = clean(markup)
        assert "<style" not in cleaned
        assert not has_animation(cleaned)

    @pytest.mark.parametrize(
        "css",
        [
            "@keyframes pop { to { opacity: 0; } } .cls-1 { fill: #f00; }",
            "@keyframes pop { to { opacity: 0; } } .cls-1 { animation: pop 1s; }",
            "@keyframes spin { to { transform: rotate(1turn); } } svg { animation: spin 1s; } .cls-1 { fill: #f00; }",
        ],
        ids=["keyframes-only", "class-animation", "mixed"],
    )
    def test_keeps_designer_style_with_keyframes(self, css):
        markup = f'<svg viewBox="0 0 24 24"><style>{css}</style><path class="cls-1" d="M1 1"/></svg>'
        assert "@keyframes" in clean(markup)
        assert ".cls-1" in clean(markup)

    def test_keeps_malformed_designer_style(self):
        markup = (
            '<svg viewBox="0 0 24 24"><style>@keyframes pop { to { opacity: 0; } } '
            '.cls-1 { animation: pop 1s; }</style><path class="cls-1" d="M1 1"/><g></svg>'
        )
        assert ".cls-1 { animation: pop 1s; }" in clean(markup)


def test_build_css_draw_targets_stroke_elements():
    css = build_css(default_spec("draw"))
    assert "svg path" in css
    assert "forwards" in css
