"""Tests for identifier normalization."""

import pytest

from utils.naming import (
    crate_name,
    feature_name,
    module_name,
    split_words,
    to_component_name,
    to_feature_flag_name,
    to_upper_camel_case,
)


@pytest.mark.parametrize("raw, expected", [
    ("pushpin", "Pushpin"),
    ("arrow-up-circle", "ArrowUpCircle"),
    ("arrow_up circle", "ArrowUpCircle"),
    ("camelCase", "CamelCase"),
    ("HTMLParser", "HtmlParser"),
    ("500px", "500px"),
    ("x--y", "XY"),
    ("", ""),
])
def test_upper_camel_case(raw, expected):
    assert to_upper_camel_case(raw) == expected


def test_split_words_handles_separators_and_case():
    assert split_words("file-earmarkPDF.fill") == ["file", "earmark", "PDF", "fill"]


def test_component_name_is_deterministic():
    assert to_component_name("battery-charging") == to_component_name("battery-charging") == "BatteryCharging"


def test_feature_name_combines_package_icon_and_variant():
    assert feature_name("ai", "pushpin", "twotone") == "AiPushpinTwotone"
    assert feature_name("fa", "address-book") == "FaAddressBook"


def test_feature_flag_name():
    assert to_feature_flag_name("ai") == "Ai"
    assert to_feature_flag_name("vs") == "Vs"


def test_module_and_crate_names():
    assert module_name("ai") == "ai"
    assert crate_name("ai") == "leptos-icons-ai"
    assert crate_name("ai", prefix="icons") == "icons-ai"
