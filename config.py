"""
Configuration — loads settings from environment / .env file.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).parent
LIBRARY_ROOT = Path(os.getenv("LIBRARY_ROOT", str(PROJECT_ROOT.parent / "leptos-icons")))
DOWNLOADS_DIR = Path(os.getenv("DOWNLOADS_DIR", str(PROJECT_ROOT / "downloads")))
BUILD_RUNS_DIR = PROJECT_ROOT / "build_runs"

# Target library
LIBRARY_NAME = "leptos-icons"
ICON_CRATE_PREFIX = "leptos-icons"
LEPTOS_VERSION = "0.2.5"

# Acquisition
CLEAN_DOWNLOADS = os.getenv("CLEAN_DOWNLOADS", "false").lower() in {"1", "true", "yes"}
GIT_TIMEOUT = int(os.getenv("GIT_TIMEOUT", "300"))

# Temporal
TEMPORAL_HOST = os.getenv("TEMPORAL_HOST", "localhost:7233")
TEMPORAL_TASK_QUEUE = "leptos-icons-build-queue"
TEMPORAL_NAMESPACE = "default"
PACKAGE_TIMEOUT_MINUTES = int(os.getenv("PACKAGE_TIMEOUT_MINUTES", "15"))
