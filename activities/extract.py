"""
Activity: Extract Icons — reads a package checkout and turns every SVG file
into a normalized Icon.

Packages differ only in where their SVG files live and where categories
come from; each LayoutKind has its own SourceReader. The resulting Icon
shape is the same for all of them.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, ValidationError

from errors import ExtractionError
from models.schemas import Feature, Icon, LayoutKind, Package
from utils.naming import feature_name
from utils.svg import parse_svg_file

log = logging.getLogger(__name__)


@dataclass
class SourceUnit:
    """One icon definition on disk, before parsing."""
    path: Path
    icon_name: str
    variant: str = ""
    categories: list[str] = field(default_factory=list)


class IconSidecar(BaseModel):
    """Per-icon JSON metadata shipped next to the SVG (e.g. Lucide)."""
    categories: list[str]
    tags: list[str] = []


class SourceReader:
    """Locates the source units of a package checkout."""

    def __init__(self, package: Package, root: Path):
        self.package = package
        self.root = root
        self._strip = re.compile(package.layout.strip_prefix) if package.layout.strip_prefix else None

    def units(self) -> Iterator[SourceUnit]:
        raise NotImplementedError

    def icon_name(self, path: Path) -> str:
        stem = path.stem
        if self._strip is not None:
            stem = self._strip.sub("", stem, count=1)
        return stem

    def directory(self, relative: str) -> Path:
        path = self.root / relative if relative else self.root
        if not path.is_dir():
            raise ExtractionError(f"[{self.package.short_name}] icon directory not found: {path}")
        return path

    @staticmethod
    def svg_files(directory: Path) -> list[Path]:
        return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".svg")


class VariantDirReader(SourceReader):
    """Each configured subdirectory holds one variant of the icon set."""

    def units(self) -> Iterator[SourceUnit]:
        for relative, variant in self.package.layout.variants:
            for path in self.svg_files(self.directory(relative)):
                yield SourceUnit(
                    path=path,
                    icon_name=self.icon_name(path),
                    variant=variant,
                    categories=[variant] if variant else [],
                )


class CategoryDirReader(SourceReader):
    """Every subdirectory of the icon root is a category."""

    def units(self) -> Iterator[SourceUnit]:
        for relative, _ in self.package.layout.variants:
            base = self.directory(relative)
            for category_dir in sorted(p for p in base.iterdir() if p.is_dir()):
                for path in self.svg_files(category_dir):
                    yield SourceUnit(
                        path=path,
                        icon_name=self.icon_name(path),
                        categories=[category_dir.name],
                    )


class SidecarJsonReader(SourceReader):
    """Categories come from a <name>.json file next to every <name>.svg."""

    def units(self) -> Iterator[SourceUnit]:
        for relative, variant in self.package.layout.variants:
            for path in self.svg_files(self.directory(relative)):
                yield SourceUnit(
                    path=path,
                    icon_name=self.icon_name(path),
                    variant=variant,
                    categories=self._read_sidecar(path).categories,
                )

    def _read_sidecar(self, svg_path: Path) -> IconSidecar:
        sidecar = svg_path.with_suffix(".json")
        try:
            return IconSidecar.model_validate_json(sidecar.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ExtractionError(f"{svg_path}: metadata file {sidecar.name} is missing") from e
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            raise ExtractionError(f"{sidecar}: invalid icon metadata: {e}") from e


READERS: dict[LayoutKind, type[SourceReader]] = {
    LayoutKind.VARIANT_DIRS: VariantDirReader,
    LayoutKind.CATEGORY_DIRS: CategoryDirReader,
    LayoutKind.SIDECAR_JSON: SidecarJsonReader,
}


def extract_icons(package: Package, root: Path) -> list[Icon]:
    """
    Parse every icon definition of a package checkout.

    Icons come back in discovery order; callers sort them.

    Raises:
        ExtractionError: a unit is malformed, lacks metadata, two units map
            to the same feature name, or the package yields no icons at all.
    """
    reader = READERS[package.layout.kind](package, root)
    icons: list[Icon] = []
    seen: dict[str, Path] = {}

    for unit in reader.units():
        name = feature_name(package.short_name, unit.icon_name, unit.variant)
        if name in seen:
            raise ExtractionError(
                f"[{package.short_name}] duplicate feature {name}: {seen[name]} and {unit.path}"
            )
        seen[name] = unit.path
        icons.append(Icon(
            package=package,
            feature=Feature(name=name, package_short_name=package.short_name),
            categories=unit.categories,
            svg=parse_svg_file(unit.path),
        ))

    if not icons:
        raise ExtractionError(f"[{package.short_name}] no icons found under {root}")

    log.info("[%s] Extracted %d icons", package.short_name, len(icons))
    return icons
