"""Tests for icon-name type declarations."""

from __future__ import annotations

from iconforge.sprite.types_file import (
    names_from_module,
    normalize_names,
    regenerate_from_module,
    regenerate_from_sprite,
    render_declarations,
    write_declarations,
)


def test_normalize_names():
    assert normalize_names(["ArrowLeft", "home", "arrow-left", "", "Zap"]) == ["arrow-left", "home", "zap"]


def test_render_declarations_alphabetical():
    text = render_declarations(["home", "arrow"])
    assert text.index("'arrow'") < text.index("'home'")
    assert "export type IconName =" in text
    assert "Object.freeze([" in text
    assert "export function isValidIconName(name: string): name is IconName" in text


def test_render_empty_union_is_never():
    assert "export type IconName = never;" in render_declarations([])


def test_names_from_module():
    source = (
        "export const arrowLeft = { body: '' };\n"
        "export function homeIcon() {}\n"
        "const a = 1, b = 2;\n"
        "export { a as zap, b };\n"
        "export const icons = { arrowLeft };\n"
    )
    assert names_from_module(source) == ["arrowLeft", "homeIcon", "zap", "b"]


def test_write_skipped_when_empty(tmp_path):
    target = tmp_path / "icons.d.ts"
    target.write_text("keep me", encoding="utf-8")
    assert write_declarations([], target) is False
    assert target.read_text(encoding="utf-8") == "keep me"


def test_regenerate_from_sprite(sprite_file, tmp_path):
    target = tmp_path / "out.d.ts"
    assert regenerate_from_sprite(sprite_file, target)
    text = target.read_text(encoding="utf-8")
    assert "| 'arrow'" in text and "| 'star'" in text


def test_regenerate_from_module(tmp_path):
    module = tmp_path / "svg-data.ts"
    module.write_text("export const mdiHome = {};\nexport const arrowLeft = {};\n", encoding="utf-8")
    target = tmp_path / "icons.d.ts"
    assert regenerate_from_module(module, target)
    text = target.read_text(encoding="utf-8")
    assert text.index("'arrow-left'") < text.index("'mdi-home'")


def test_regenerate_from_missing_source(tmp_path):
    assert regenerate_from_sprite(tmp_path / "none.svg", tmp_path / "x.d.ts") is False
