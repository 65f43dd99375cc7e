"""
Activity: Library Files — owns the layout of the generated leptos-icons
crate, resets it to a clean skeleton and appends the aggregate artifacts.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Sequence

import config
from errors import LibraryError
from features.aggregation.models import AggregateResult
from models.schemas import Feature, Package, PackageIconMeta
from utils import leptos
from utils.naming import module_name

log = logging.getLogger(__name__)


class Library:
    """The generated crate on disk."""

    def __init__(self, root: Path | str | None = None):
        self.root = Path(root or config.LIBRARY_ROOT)

    def __repr__(self) -> str:
        return f"Library({str(self.root)!r})"

    @property
    def src_dir(self) -> Path:
        return self.root / "src"

    @property
    def lib_rs(self) -> Path:
        return self.src_dir / "lib.rs"

    @property
    def cargo_toml(self) -> Path:
        return self.root / "Cargo.toml"

    @property
    def readme_md(self) -> Path:
        return self.root / "README.md"

    @property
    def icons_md(self) -> Path:
        return self.root / "ICONS.md"

    def module_path(self, short_name: str) -> Path:
        return self.src_dir / f"{module_name(short_name)}.rs"

    def assert_root(self) -> None:
        """Refuse to touch a directory that is not the leptos-icons crate."""
        if self.root.name != config.LIBRARY_NAME:
            raise LibraryError(
                f"library root must be a directory named {config.LIBRARY_NAME!r}, got {self.root}"
            )

    def reset(self) -> None:
        """Remove all generated output and write fresh skeleton files."""
        self.assert_root()
        log.info("Resetting library directory %s", self.root)
        self.root.mkdir(parents=True, exist_ok=True)
        if self.src_dir.exists():
            shutil.rmtree(self.src_dir)
        self.src_dir.mkdir()

        self.lib_rs.write_text(leptos.render_lib_rs_skeleton(), encoding="utf-8")
        self.cargo_toml.write_text(leptos.render_cargo_toml_skeleton(), encoding="utf-8")
        self.readme_md.write_text(leptos.render_readme_skeleton(), encoding="utf-8")
        self.icons_md.write_text(leptos.render_icons_md_skeleton(), encoding="utf-8")

    def write_module(self, short_name: str, source: str) -> Path:
        """Create or truncate a package's module file."""
        path = self.module_path(short_name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def _append(self, path: Path, text: str) -> None:
        if not path.is_file():
            raise LibraryError(f"{path} does not exist; reset the library first")
        with open(path, "a", encoding="utf-8") as f:
            f.write(text)

    def append_modules(self, modules: Sequence[str]) -> None:
        log.info("Writing %d modules to lib.rs", len(modules))
        self._append(self.lib_rs, leptos.render_module_registration(modules))

    def append_cargo_sections(self, features: Sequence[Feature], packages: Sequence[Package]) -> None:
        log.info("Writing %d features to Cargo.toml", len(features))
        self._append(
            self.cargo_toml,
            leptos.render_package_section() + leptos.render_feature_sections(features, packages),
        )

    def append_readme(self, packages: Sequence[Package]) -> None:
        log.info("Writing README.md")
        self._append(
            self.readme_md,
            leptos.render_usage() + leptos.render_package_table(packages) + leptos.render_contribution(),
        )

    def append_icon_table(self, package_icon_metadata: Sequence[PackageIconMeta]) -> None:
        log.info("Writing ICONS.md")
        self._append(self.icons_md, leptos.render_icon_table(package_icon_metadata))


def write_aggregates(library: Library, result: AggregateResult, packages: Sequence[Package]) -> None:
    """
    Write lib.rs registration, Cargo.toml sections, README.md and ICONS.md.

    Only packages that produced a module are declared as dependencies and
    umbrella features. Any failure here is fatal to the run.
    """
    by_short_name = {p.short_name: p for p in packages}
    included = [by_short_name[m] for m in result.modules if m in by_short_name]

    library.append_modules(result.modules)
    library.append_cargo_sections(result.features, included)
    library.append_readme(included)
    library.append_icon_table(result.package_icon_metadata)
