"""
In-process build driver.

Runs the whole build inside one event loop:
  1. Reset the library tree
  2. Fan out one task per package (acquire, extract, sort, contribute, write module)
  3. Join, with a single aggregator task consuming contributions from a channel
  4. Finalize: sort modules and features
  5. Write lib.rs, Cargo.toml, README.md and ICONS.md
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

import config
from activities.library import Library, write_aggregates
from activities.process_package import run_package
from features.aggregation import Aggregator
from models.packages import all_packages
from models.schemas import BuildReport, Package

log = logging.getLogger(__name__)


def new_run_id() -> str:
    return f"build-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}-{uuid.uuid4().hex[:6]}"


def save_run_log(report: BuildReport, runs_dir: Path | None = None) -> str:
    """Save the build report as JSON and return its path."""
    runs_dir = runs_dir or config.BUILD_RUNS_DIR
    runs_dir.mkdir(parents=True, exist_ok=True)
    file_path = runs_dir / f"{report.run_id}.json"
    report.log_file = str(file_path)
    with open(file_path, "w") as f:
        json.dump(asdict(report), f, indent=2, default=str)
    log.info("Run log saved: %s", file_path)
    return str(file_path)


async def run_build(
    library: Library | None = None,
    packages: Iterable[Package] | None = None,
    clean: bool | None = None,
    downloads_dir: Path | None = None,
    runs_dir: Path | None = None,
    save_log: bool = True,
) -> BuildReport:
    """
    Regenerate the whole library.

    Package failures are logged and returned in the report; they never stop
    the other packages. Failures while resetting the tree or writing the
    aggregate files propagate.
    """
    library = library or Library()
    packages = list(packages) if packages is not None else all_packages()
    clean = config.CLEAN_DOWNLOADS if clean is None else clean

    report = BuildReport(
        run_id=new_run_id(),
        library_root=str(library.root),
        started_at=datetime.now(timezone.utc).isoformat(),
        status="running",
    )
    build_start = time.monotonic()
    loop = asyncio.get_running_loop()

    await loop.run_in_executor(None, library.reset)

    channel: asyncio.Queue = asyncio.Queue()
    aggregator = Aggregator()
    consumer = asyncio.create_task(aggregator.consume(channel))

    async def package_task(package: Package) -> None:
        failure = await run_package(package, library, channel.put, downloads_dir=downloads_dir, clean=clean)
        if failure is not None:
            await channel.put(failure)

    log.info("Processing %d packages", len(packages))
    try:
        await asyncio.gather(*(package_task(p) for p in packages))
    finally:
        await channel.put(None)
        await consumer

    result = aggregator.finalize()
    for failure in result.failures:
        log.error("Package %s failed during %s: %s", failure.short_name, failure.stage, failure.error)

    await loop.run_in_executor(None, write_aggregates, library, result, packages)

    report.modules = result.modules
    report.num_features = len(result.features)
    report.failures = result.failures
    report.status = "completed_with_failures" if result.failures else "completed"
    report.completed_at = datetime.now(timezone.utc).isoformat()
    report.duration_sec = round(time.monotonic() - build_start, 2)

    if save_log:
        save_run_log(report, runs_dir)

    log.info(
        "Build %s finished in %.1fs: %d modules, %d features, %d failed packages",
        report.run_id, report.duration_sec, len(report.modules), report.num_features, len(report.failures),
    )
    return report
