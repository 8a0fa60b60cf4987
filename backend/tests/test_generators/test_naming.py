"""Tests for identifier conversions."""

from __future__ import annotations

import pytest

from iconforge.generators.naming import (
    generate_unique_name,
    is_valid_icon_name,
    parse_icon_prefix,
    sanitize_identifier,
    to_camel_case,
    to_component_name,
    to_custom_element_name,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_variable_name,
)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("arrow-left", "ArrowLeft"),
        ("arrow_left", "ArrowLeft"),
        ("rocket", "Rocket"),
        ("arrowLeft", "ArrowLeft"),
        ("mdi:home-outline", "MdiHomeOutline"),
        ("user profile", "UserProfile"),
    ],
)
def test_to_pascal_case(name, expected):
    assert to_pascal_case(name) == expected


def test_other_cases():
    assert to_camel_case("arrow-left") == "arrowLeft"
    assert to_kebab_case("ArrowRight") == "arrow-right"
    assert to_kebab_case("HTMLParser") == "html-parser"
    assert to_snake_case("arrow-left") == "arrow_left"


def test_identifiers_never_start_with_digit():
    assert to_component_name("2fa-lock") == "Icon2faLock"
    assert to_variable_name("3d") == "icon3d"
    assert sanitize_identifier("") == "Icon"


def test_custom_element_name_has_hyphen():
    assert to_custom_element_name("home") == "home-icon"
    assert to_custom_element_name("arrow-left") == "arrow-left-icon"
    assert to_custom_element_name("search-icon") == "search-icon"
    assert to_custom_element_name("404") == "icon-404-icon"


def test_parse_icon_prefix():
    assert parse_icon_prefix("mdi:home") == ("mdi", "home")
    assert parse_icon_prefix("home") == (None, "home")


def test_is_valid_icon_name():
    assert is_valid_icon_name("arrow-left")
    assert is_valid_icon_name("mdi:home")
    assert not is_valid_icon_name("Arrow Left")
    assert not is_valid_icon_name("")


def test_generate_unique_name():
    assert generate_unique_name("icon", []) == "icon"
    assert generate_unique_name("icon", {"icon", "icon-1"}) == "icon-2"
