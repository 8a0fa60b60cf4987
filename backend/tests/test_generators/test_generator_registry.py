"""Tests for the framework generator registry."""

from __future__ import annotations

import pytest

from iconforge.errors import UnsupportedOptionError, UnsupportedTargetError
from iconforge.generators import available_targets, get_registry, resolve_target
from iconforge.generators.registry import GeneratorRegistry, GeneratorSpec, check_registry
from iconforge.models.export_options import BodyMode, ComponentExportOptions, ExportStyle, Framework


def _noop(ctx):
    return None


def test_every_framework_registered():
    registry = get_registry()
    assert registry.count == len(Framework)
    assert registry.missing() == []
    check_registry()


def test_duplicate_registration_rejected():
    reg = GeneratorRegistry()
    reg.register(GeneratorSpec(target=Framework.REACT, fn=_noop, name="React"))
    with pytest.raises(ValueError):
        reg.register(GeneratorSpec(target=Framework.REACT, fn=_noop, name="React again"))


def test_incomplete_registry_fails_check():
    reg = GeneratorRegistry()
    reg.register(GeneratorSpec(target=Framework.REACT, fn=_noop, name="React"))
    with pytest.raises(RuntimeError, match="vue"):
        check_registry(reg)


def test_resolve_target():
    assert resolve_target("Vue-SFC") is Framework.VUE_SFC
    assert resolve_target(Framework.LIT) is Framework.LIT
    with pytest.raises(UnsupportedTargetError):
        resolve_target("ember")


def test_unknown_target_is_a_value_error():
    with pytest.raises(ValueError):
        get_registry().get("flutter")


class TestOptionChecks:
    def test_forward_ref_only_for_react_family(self):
        get_registry().get(Framework.REACT).check(ComponentExportOptions(forward_ref=True))
        with pytest.raises(UnsupportedOptionError):
            get_registry().get(Framework.SVELTE).check(
                ComponentExportOptions(target=Framework.SVELTE, forward_ref=True)
            )

    def test_svelte_has_no_named_export(self):
        spec = get_registry().get(Framework.SVELTE)
        assert spec.resolve_export_style(ComponentExportOptions()) == ExportStyle.DEFAULT
        with pytest.raises(UnsupportedOptionError):
            spec.check(ComponentExportOptions(target=Framework.SVELTE, export_style=ExportStyle.NAMED))

    def test_react_native_rejects_sprite_body(self):
        spec = get_registry().get(Framework.REACT_NATIVE)
        with pytest.raises(UnsupportedOptionError):
            spec.check(ComponentExportOptions(target=Framework.REACT_NATIVE))
        spec.check(ComponentExportOptions(target=Framework.REACT_NATIVE, body_mode=BodyMode.INLINE))


def test_available_targets_listing():
    targets = available_targets()
    assert [t["id"] for t in targets] == [f.value for f in Framework]
    react = next(t for t in targets if t["id"] == "react")
    assert react["forward_ref"] is True
    assert react["body_modes"] == ["inline", "sprite"]
