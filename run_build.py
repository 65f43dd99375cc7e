"""
Rebuild the leptos-icons library in-process, without Temporal.

Usage:
    python run_build.py

Set CLEAN_DOWNLOADS=true to remove and re-fetch every package first.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from workflows.driver import run_build

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger(__name__)


def main() -> int:
    report = asyncio.run(run_build())
    for failure in report.failures:
        log.error("Failed package: %s (%s)", failure.short_name, failure.stage)
    return 0


if __name__ == "__main__":
    sys.exit(main())
