"""
Activity: Acquire Package — makes a package's source material available on
local disk, either by cloning its git repository or by pointing at a local
directory.

Safe to call repeatedly: an existing checkout is reused unless `clean` is set.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

import config
from errors import AcquisitionError
from models.schemas import Package

log = logging.getLogger(__name__)


def checkout_dir(package: Package, downloads_dir: Path | None = None) -> Path:
    """Directory holding the package's source tree."""
    if not package.is_remote:
        return Path(package.source)
    return (downloads_dir or config.DOWNLOADS_DIR) / package.short_name


def remove(package: Package, downloads_dir: Path | None = None) -> None:
    """Delete a downloaded checkout. Local sources are never touched."""
    if not package.is_remote:
        return
    target = checkout_dir(package, downloads_dir)
    if target.exists():
        log.info("[%s] Removing checkout %s", package.short_name, target)
        shutil.rmtree(target)


def acquire(package: Package, downloads_dir: Path | None = None, clean: bool = False) -> Path:
    """
    Ensure the package source exists locally and return its root.

    Raises:
        AcquisitionError: the local directory is missing or git failed.
    """
    if clean:
        remove(package, downloads_dir)

    target = checkout_dir(package, downloads_dir)
    if not package.is_remote:
        if not target.is_dir():
            raise AcquisitionError(f"[{package.short_name}] local source not found: {target}")
        log.info("[%s] Using local source %s", package.short_name, target)
        return target

    if (target / ".git").is_dir():
        log.info("[%s] Already downloaded to %s", package.short_name, target)
        return target
    if target.exists():
        log.warning("[%s] Removing incomplete checkout %s", package.short_name, target)
        shutil.rmtree(target)

    target.parent.mkdir(parents=True, exist_ok=True)
    args = ["clone", "--depth", "1"]
    if package.git_ref:
        args += ["--branch", package.git_ref]
    args += [package.source, str(target)]

    log.info("[%s] Cloning %s (%s)", package.short_name, package.source, package.git_ref or "default branch")
    _git(package, *args)
    return target


def _git(package: Package, *args: str) -> str:
    """Run a git command, raising AcquisitionError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            timeout=config.GIT_TIMEOUT,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise AcquisitionError(f"[{package.short_name}] git {args[0]} failed: {e}") from e
    if result.returncode != 0:
        raise AcquisitionError(
            f"[{package.short_name}] git {args[0]} exited with {result.returncode}: {result.stderr.strip()}"
        )
    return result.stdout
