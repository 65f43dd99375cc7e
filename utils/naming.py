"""
Identifier helpers — turn raw package and icon names into Rust identifiers
and cargo feature names.
"""

from __future__ import annotations

import re

import config

_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
# lower->Upper ("pushPin") and acronym->Word ("HTMLParser") boundaries
_CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def split_words(raw: str) -> list[str]:
    words: list[str] = []
    for chunk in _SEPARATORS.split(raw):
        if chunk:
            words.extend(w for w in _CASE_BOUNDARY.split(chunk) if w)
    return words


def to_upper_camel_case(raw: str) -> str:
    return "".join(word[0].upper() + word[1:].lower() for word in split_words(raw))


def to_component_name(raw_icon_name: str) -> str:
    """Name of the generated component function for an icon."""
    return to_upper_camel_case(raw_icon_name)


def to_feature_flag_name(package_short_name: str) -> str:
    """Umbrella cargo feature of a package, e.g. "ai" -> "Ai"."""
    return to_upper_camel_case(package_short_name)


def feature_name(package_short_name: str, icon_name: str, variant: str = "") -> str:
    """Feature (and component) name of one icon, e.g. AiPushpinTwotone."""
    return to_component_name(" ".join(p for p in (package_short_name, icon_name, variant) if p))


def module_name(package_short_name: str) -> str:
    return "_".join(word.lower() for word in split_words(package_short_name))


def crate_name(package_short_name: str, prefix: str | None = None) -> str:
    """Per-package crate, e.g. "leptos-icons-ai"."""
    return f"{prefix or config.ICON_CRATE_PREFIX}-{module_name(package_short_name).replace('_', '-')}"
