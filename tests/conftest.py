"""Shared pytest fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure the repo root is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from activities.library import Library  # noqa: E402
from models.schemas import LayoutKind, Package, PackageType, SourceLayout  # noqa: E402

SVG_NS = "http://www.w3.org/2000/svg"


def svg_markup(d: str = "M0 0h24v24H0z", **root_attrs: str) -> str:
    attrs = "".join(f' {k.replace("_", "-")}="{v}"' for k, v in root_attrs.items())
    return f'<svg xmlns="{SVG_NS}" viewBox="0 0 24 24"{attrs}><title>icon</title><path d="{d}"/></svg>'


def write_svg(path: Path, markup: str | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(markup if markup is not None else svg_markup(), encoding="utf-8")
    return path


@pytest.fixture
def library(tmp_path) -> Library:
    return Library(tmp_path / "leptos-icons")


@pytest.fixture
def sources(tmp_path) -> Path:
    path = tmp_path / "sources"
    path.mkdir()
    return path


@pytest.fixture
def ai_package(sources) -> Package:
    """Ant Design style: one directory per variant."""
    root = sources / "ai"
    write_svg(root / "filled" / "pushpin.svg")
    write_svg(root / "filled" / "home.svg")
    write_svg(root / "twotone" / "pushpin.svg", svg_markup(d="M1 1h2"))
    return Package(
        ty=PackageType.ANT_DESIGN_ICONS,
        short_name="ai",
        name="Ant Design Icons",
        source=str(root),
        layout=SourceLayout(LayoutKind.VARIANT_DIRS, (("filled", "fill"), ("twotone", "twotone"))),
        license="MIT",
    )


@pytest.fixture
def fa_package(sources) -> Package:
    """Icons are discovered as FaB, FaC, FaA."""
    root = sources / "fa"
    write_svg(root / "svgs" / "x" / "c.svg")
    write_svg(root / "svgs" / "x" / "b.svg")
    write_svg(root / "svgs" / "y" / "a.svg")
    return Package(
        ty=PackageType.FONT_AWESOME,
        short_name="fa",
        name="Font Awesome",
        source=str(root),
        layout=SourceLayout(LayoutKind.VARIANT_DIRS, (("svgs/x", ""), ("svgs/y", ""))),
        license="CC BY 4.0",
    )


@pytest.fixture
def lu_package(sources) -> Package:
    """Lucide style: categories in a JSON file next to each SVG."""
    root = sources / "lu"
    write_svg(root / "icons" / "anchor.svg")
    (root / "icons" / "anchor.json").write_text(
        '{"categories": ["transportation", "navigation"], "tags": ["ship"]}', encoding="utf-8",
    )
    return Package(
        ty=PackageType.LUCIDE,
        short_name="lu",
        name="Lucide",
        source=str(root),
        layout=SourceLayout(LayoutKind.SIDECAR_JSON, (("icons", ""),)),
        license="ISC",
    )


@pytest.fixture
def ri_package(sources) -> Package:
    """Remix style: one directory per category."""
    root = sources / "ri"
    write_svg(root / "icons" / "Buildings" / "home-line.svg")
    write_svg(root / "icons" / "Arrows" / "arrow-up-line.svg")
    return Package(
        ty=PackageType.REMIX_ICON,
        short_name="ri",
        name="Remix Icon",
        source=str(root),
        layout=SourceLayout(LayoutKind.CATEGORY_DIRS, (("icons", ""),)),
        license="Apache 2.0",
    )


@pytest.fixture
def missing_package(sources) -> Package:
    """A package whose local source does not exist."""
    return Package(
        ty=PackageType.WEATHER_ICONS,
        short_name="wi",
        name="Weather Icons",
        source=str(sources / "does-not-exist"),
        layout=SourceLayout(LayoutKind.VARIANT_DIRS, (("svg", ""),), strip_prefix=r"^wi-"),
    )
