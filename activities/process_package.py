"""
Activity: Process Package — acquires one icon package, extracts and sorts
its icons, reports its contribution to the aggregator and writes the
package's leptos module.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable

from activities.acquire import acquire
from activities.extract import extract_icons
from activities.library import Library
from errors import AcquisitionError, BuildError
from models.schemas import IconMeta, Package, PackageContribution, PackageFailure
from utils.leptos import render_module

log = logging.getLogger(__name__)

Submit = Callable[[PackageContribution], Awaitable[None]]


async def process_package(
    package: Package,
    library: Library,
    submit: Submit,
    downloads_dir: Path | None = None,
    clean: bool = False,
) -> Path:
    """
    Run every stage for one package and return the written module path.

    The contribution is submitted before the module is rendered and written,
    so a failure in those last steps leaves the aggregate state as it is.

    Raises:
        BuildError: acquisition, extraction or rendering failed.
        OSError: the module file could not be written.
    """
    loop = asyncio.get_running_loop()

    try:
        root = await loop.run_in_executor(None, acquire, package, downloads_dir, clean)
    except OSError as e:
        raise AcquisitionError(f"[{package.short_name}] could not prepare checkout: {e}") from e

    icons = extract_icons(package, root)
    # Sorted so the generated module does not churn between runs.
    icons.sort(key=lambda icon: icon.component_name)

    log.info("[%s] Collecting icon metadata, feature names and module name", package.short_name)
    await submit(PackageContribution(
        package_type=package.ty,
        module=package.short_name,
        features=[icon.feature for icon in icons],
        icon_meta=[IconMeta.from_icon(icon) for icon in icons],
    ))

    log.info("[%s] Generating %d leptos icon components", package.short_name, len(icons))
    source = render_module(icons)

    path = await loop.run_in_executor(None, library.write_module, package.short_name, source)
    log.info("[%s] Wrote %s", package.short_name, path)
    return path


async def run_package(
    package: Package,
    library: Library,
    submit: Submit,
    downloads_dir: Path | None = None,
    clean: bool = False,
) -> PackageFailure | None:
    """Process a package and turn any failure into a PackageFailure."""
    try:
        await process_package(package, library, submit, downloads_dir=downloads_dir, clean=clean)
    except (BuildError, OSError) as e:
        stage = e.stage if isinstance(e, BuildError) else "write"
        log.error("[%s] Could not process package (stage: %s): %s", package.short_name, stage, e)
        return PackageFailure(
            package_type=package.ty,
            short_name=package.short_name,
            stage=stage,
            error=str(e),
        )
    except Exception as e:
        # Unexpected errors fail this package only.
        log.exception("[%s] Unexpected error while processing package", package.short_name)
        return PackageFailure(
            package_type=package.ty,
            short_name=package.short_name,
            stage="internal",
            error=f"{type(e).__name__}: {e}",
        )
    return None
