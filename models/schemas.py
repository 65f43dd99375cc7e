"""
Data models for the icon build.

Packages and features are immutable; icons are created once by the
extractor and only re-ordered afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PackageType(str, Enum):
    ANT_DESIGN_ICONS = "ai"
    BOX_ICONS = "bi"
    BOOTSTRAP_ICONS = "bs"
    CSS_GG = "cg"
    FONT_AWESOME = "fa"
    FEATHER = "fi"
    HERO_ICONS = "hi"
    ICO_MOON_FREE = "im"
    IONICONS = "io"
    LUCIDE = "lu"
    GITHUB_OCTICONS = "oc"
    REMIX_ICON = "ri"
    SIMPLE_ICONS = "si"
    TABLER_ICONS = "tb"
    TYPICONS = "ti"
    VS_CODE_ICONS = "vs"
    WEATHER_ICONS = "wi"


class LayoutKind(str, Enum):
    VARIANT_DIRS = "variant-dirs"
    CATEGORY_DIRS = "category-dirs"
    SIDECAR_JSON = "sidecar-json"


@dataclass(frozen=True)
class SourceLayout:
    """Where a package keeps its SVG files and how metadata is attached."""
    kind: LayoutKind
    # (subdirectory, variant) pairs, relative to the checkout root
    variants: tuple[tuple[str, str], ...] = (("", ""),)
    strip_prefix: str | None = None


@dataclass(frozen=True)
class Package:
    """One external icon source."""
    ty: PackageType
    short_name: str
    name: str
    source: str  # git URL or local directory
    layout: SourceLayout
    git_ref: str | None = None
    license: str = ""

    @property
    def is_remote(self) -> bool:
        return "://" in self.source or self.source.startswith("git@")


@dataclass(frozen=True, order=True)
class Feature:
    """The externally addressable name of one icon."""
    name: str
    package_short_name: str = field(compare=False)


@dataclass
class SvgNode:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[SvgNode] = field(default_factory=list)
    text: str | None = None
    # Text following this element inside its parent (mixed content).
    tail: str | None = None


@dataclass
class Icon:
    """A single glyph extracted from a package."""
    package: Package
    feature: Feature
    categories: list[str]
    svg: SvgNode

    @property
    def component_name(self) -> str:
        return self.feature.name


@dataclass
class IconMeta:
    name: str
    categories: list[str] = field(default_factory=list)

    @classmethod
    def from_icon(cls, icon: Icon) -> IconMeta:
        return cls(name=icon.feature.name, categories=list(icon.categories))


@dataclass
class PackageIconMeta:
    """Icon metadata of one package type, used for ICONS.md."""
    package_type: PackageType
    icons: list[IconMeta] = field(default_factory=list)


@dataclass
class PackageContribution:
    """What one package adds to the aggregate artifacts."""
    package_type: PackageType
    module: str
    features: list[Feature] = field(default_factory=list)
    icon_meta: list[IconMeta] = field(default_factory=list)


@dataclass
class PackageFailure:
    """A package whose processing stopped early."""
    package_type: PackageType
    short_name: str
    stage: str
    error: str


@dataclass
class PackageOutcome:
    """Result of one package task as reported across a worker boundary."""
    package_type: PackageType
    contribution: PackageContribution | None = None
    failure: PackageFailure | None = None


@dataclass
class BuildReport:
    """Complete record of a build run."""
    run_id: str = ""
    library_root: str = ""
    started_at: str = ""
    completed_at: str = ""
    duration_sec: float = 0.0
    status: str = "pending"
    modules: list[str] = field(default_factory=list)
    num_features: int = 0
    failures: list[PackageFailure] = field(default_factory=list)
    log_file: str = ""
