"""
Leptos code generation — renders icons into component source and aggregate
build results into lib.rs, Cargo.toml and markdown fragments.

Nothing here sorts. Every input is expected in its final order so the
output is byte-stable across runs.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

import config
from errors import RenderError
from models.packages import get_package
from models.schemas import Feature, Icon, Package, PackageIconMeta, SvgNode
from utils.naming import crate_name, module_name, to_feature_flag_name

RUST_BANNER = (
    "// ------------------------------------------------------------------------------------------\n"
    "// THIS FILE WAS GENERATED BY THE \"BUILD\" CRATE.\n"
    "// ------------------------------------------------------------------------------------------\n"
    "\n"
)
TOML_BANNER = RUST_BANNER.replace("//", "#")
MARKDOWN_BANNER = "<!-- THIS FILE WAS GENERATED BY THE \"BUILD\" CRATE. -->\n\n"

MODULE_HEADER = "use leptos::*;\n\n"

# Root attributes replaced by component props or meaningless inside the DOM.
MANAGED_ROOT_ATTRIBUTES = {"width", "height", "class", "style", "id", "version"}

_MARKUP_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_:-]*$")

_INDENT = "    "


def _literal(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _markup_name(name: str, icon_name: str) -> str:
    if not _MARKUP_NAME.match(name):
        raise RenderError(f"{icon_name}: {name!r} is not usable in view! markup")
    return name


def _render_node(node: SvgNode, depth: int, icon_name: str) -> list[str]:
    indent = _INDENT * depth
    tag = _markup_name(node.tag, icon_name)
    attributes = "".join(
        f" {_markup_name(key, icon_name)}={_literal(value)}"
        for key, value in node.attributes.items()
    )
    if not node.children and node.text is None:
        return [f"{indent}<{tag}{attributes}/>"]

    lines = [f"{indent}<{tag}{attributes}>"]
    if node.text is not None:
        lines.append(f"{indent}{_INDENT}{{{_literal(node.text)}}}")
    for child in node.children:
        lines.extend(_render_node(child, depth + 1, icon_name))
        if child.tail is not None:
            lines.append(f"{indent}{_INDENT}{{{_literal(child.tail)}}}")
    lines.append(f"{indent}</{tag}>")
    return lines


def _color_attribute(svg: SvgNode) -> str | None:
    """Root attribute the `color` prop overrides, if any."""
    for attr in ("fill", "stroke"):
        if svg.attributes.get(attr) == "currentColor":
            return attr
    if "fill" not in svg.attributes:
        return "fill"
    return None


def render_module_header() -> str:
    return MODULE_HEADER


def render_component(icon: Icon) -> str:
    """
    Render one icon as a feature-gated leptos component.

    Raises:
        RenderError: a tag or attribute name cannot be written as markup.
    """
    name = icon.component_name
    svg = icon.svg
    color_attr = _color_attribute(svg)

    lines = [
        f'#[cfg(feature = "{name}")]',
        "#[component]",
        f"pub fn {name}(",
        "    cx: Scope,",
        "    /// The width and height of the svg.",
        "    #[prop(into, optional)] size: Option<String>,",
        "    /// Overrides the icon's fill or stroke color.",
        "    #[prop(into, optional)] color: Option<String>,",
        "    #[prop(into, optional)] style: Option<String>,",
        "    #[prop(into, optional)] class: Option<String>,",
        "    /// Rendered as the svg's <title> element.",
        "    #[prop(into, optional)] title: Option<String>,",
        ") -> impl IntoView {",
        "    view! { cx,",
        "        <svg",
        "            class=class",
        "            style=style",
        '            width=size.clone().unwrap_or_else(|| "1em".to_string())',
        '            height=size.unwrap_or_else(|| "1em".to_string())',
    ]
    if color_attr is not None:
        lines.append(f'            {color_attr}=color.unwrap_or_else(|| "currentColor".to_string())')
    for key, value in svg.attributes.items():
        if key in MANAGED_ROOT_ATTRIBUTES or key == color_attr:
            continue
        lines.append(f"            {_markup_name(key, name)}={_literal(value)}")
    lines.append("        >")
    lines.append("            {title.map(|title| view! { cx, <title>{title}</title> })}")
    if svg.text is not None:
        lines.append(f"            {{{_literal(svg.text)}}}")
    for child in svg.children:
        lines.extend(_render_node(child, 3, name))
    lines.extend([
        "        </svg>",
        "    }",
        "}",
        "",
        "",
    ])
    return "\n".join(lines)


def render_module(icons: Iterable[Icon]) -> str:
    """Header followed by every component, in the order given."""
    return render_module_header() + "".join(render_component(icon) for icon in icons)


# ── Aggregate artifacts ───────────────────────────────────────────────

def render_lib_rs_skeleton() -> str:
    return RUST_BANNER + "#![allow(non_snake_case)]\n\n"


def render_module_registration(modules: Sequence[str]) -> str:
    return "".join(f"pub mod {module_name(name)};\n" for name in modules)


def render_cargo_toml_skeleton() -> str:
    return TOML_BANNER


def render_package_section(lib_name: str | None = None) -> str:
    return (
        "[package]\n"
        f'name = "{lib_name or config.LIBRARY_NAME}"\n'
        'version = "0.0.1"\n'
        'edition = "2021"\n'
        'description = "Icons library for the leptos web framework"\n'
        'readme = "./README.md"\n'
        'license = "MIT"\n'
        'keywords = ["leptos", "icons"]\n'
        'categories = ["web-programming"]\n'
        "\n"
    )


def render_feature_sections(features: Sequence[Feature], packages: Sequence[Package]) -> str:
    """
    Render [dependencies] and [features].

    Each package gets an umbrella flag (`Ai = []`); each icon flag enables
    its umbrella and the same flag on the package crate:
    `AiPushpinTwotone = ["Ai", "leptos-icons-ai/AiPushpinTwotone"]`.

    Keys are written bare on purpose. Feature names are UpperCamelCase
    identifiers, so the bare key is the same TOML key as the quoted form.
    """
    parts = [
        "[dependencies]\n",
        f'leptos = {{ version = "{config.LEPTOS_VERSION}", default-features = false }}\n',
        'serde = { version = "1", features = ["derive"], optional = true }\n',
    ]
    for package in packages:
        crate = crate_name(package.short_name)
        parts.append(f'{crate} = {{ path = "../{crate}", optional = true }}\n')

    parts.append("\n[features]\n")
    parts.append('serde = ["dep:serde"]\n\n')
    for package in packages:
        parts.append(f"{to_feature_flag_name(package.short_name)} = []\n")
    if packages:
        parts.append("\n")
    for feature in features:
        umbrella = to_feature_flag_name(feature.package_short_name)
        crate = crate_name(feature.package_short_name)
        parts.append(f'{feature.name} = ["{umbrella}", "{crate}/{feature.name}"]\n')
    return "".join(parts)


def _cell(text: str) -> str:
    return text.replace("|", "\\|")


def render_icon_table(package_icon_metadata: Sequence[PackageIconMeta]) -> str:
    """One markdown section per package type listing icon names and categories."""
    parts = []
    for entry in package_icon_metadata:
        package = get_package(entry.package_type)
        metas = entry.icons
        parts.append(f"## {package.name}\n\n")
        parts.append(f"Short name: `{package.short_name}`, icons: {len(metas)}\n\n")
        if not metas:
            parts.append("_No icons were generated for this package._\n\n")
            continue
        parts.append("| Name | Categories |\n| --- | --- |\n")
        for meta in metas:
            parts.append(f"| {_cell(meta.name)} | {_cell(', '.join(meta.categories))} |\n")
        parts.append("\n")
    return "".join(parts)


def render_readme_skeleton() -> str:
    return MARKDOWN_BANNER + f"# {config.LIBRARY_NAME}\n\n"


def render_icons_md_skeleton() -> str:
    return MARKDOWN_BANNER + "# Icons\n\n"


def render_usage() -> str:
    return (
        "## Usage\n\n"
        "Every icon is a component behind its own cargo feature. Enable the icons you need:\n\n"
        "```toml\n"
        f'{config.LIBRARY_NAME} = {{ version = "0.0.1", features = ["AiPushpinTwotone"] }}\n'
        "```\n\n"
        "```rust\n"
        f"use {config.LIBRARY_NAME.replace('-', '_')}::ai::AiPushpinTwotone;\n\n"
        'view! { cx, <AiPushpinTwotone size="2em" /> }\n'
        "```\n\n"
    )


def render_package_table(packages: Sequence[Package]) -> str:
    parts = [
        "## Packages\n\n",
        "| Package | Module | Feature | License | Source |\n",
        "| --- | --- | --- | --- | --- |\n",
    ]
    for package in packages:
        parts.append(
            f"| {_cell(package.name)} | `{module_name(package.short_name)}` "
            f"| `{to_feature_flag_name(package.short_name)}` | {_cell(package.license)} "
            f"| {package.source} |\n"
        )
    parts.append("\n")
    return "".join(parts)


def render_contribution() -> str:
    return (
        "## Contributing\n\n"
        "This crate is generated. Do not edit it by hand; change the build and "
        "regenerate the whole library instead.\n"
    )
