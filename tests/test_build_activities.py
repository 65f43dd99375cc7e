"""Tests for the Temporal activities, run without a Temporal server."""

import asyncio

from temporalio.testing import ActivityEnvironment

import config
from workflows import build


def test_process_package_activity_reports_outcome(tmp_path, monkeypatch, ai_package):
    monkeypatch.setattr(config, "LIBRARY_ROOT", tmp_path / "leptos-icons")
    monkeypatch.setattr(build, "get_package", lambda package_type: ai_package)

    env = ActivityEnvironment()
    asyncio.run(env.run(build.reset_library))
    outcome = asyncio.run(env.run(build.process_package_activity, "ai", False))

    assert outcome.failure is None
    assert outcome.contribution.module == "ai"
    assert [f.name for f in outcome.contribution.features] == ["AiHomeFill", "AiPushpinFill", "AiPushpinTwotone"]
    assert (tmp_path / "leptos-icons" / "src" / "ai.rs").exists()


def test_process_package_activity_reports_failure(tmp_path, monkeypatch, missing_package):
    monkeypatch.setattr(config, "LIBRARY_ROOT", tmp_path / "leptos-icons")
    monkeypatch.setattr(build, "get_package", lambda package_type: missing_package)

    env = ActivityEnvironment()
    asyncio.run(env.run(build.reset_library))
    outcome = asyncio.run(env.run(build.process_package_activity, "wi", False))

    assert outcome.contribution is None
    assert outcome.failure.stage == "acquire"
