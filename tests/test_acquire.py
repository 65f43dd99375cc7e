"""Tests for package acquisition."""

import subprocess
from pathlib import Path

import pytest

from activities import acquire as acquire_module
from activities.acquire import acquire, checkout_dir
from errors import AcquisitionError
from models.schemas import LayoutKind, Package, PackageType, SourceLayout

REMOTE = Package(
    ty=PackageType.FEATHER,
    short_name="fi",
    name="Feather",
    source="https://github.com/feathericons/feather",
    layout=SourceLayout(LayoutKind.VARIANT_DIRS, (("icons", ""),)),
    git_ref="v4.29.1",
)


class FakeGit:
    def __init__(self, returncode=0, stderr=""):
        self.calls = []
        self.returncode = returncode
        self.stderr = stderr

    def __call__(self, cmd, **kwargs):
        self.calls.append(cmd)
        if self.returncode == 0:
            target = cmd[-1]
            (Path(target) / ".git").mkdir(parents=True)
        return subprocess.CompletedProcess(cmd, self.returncode, stdout="", stderr=self.stderr)


def test_local_source_is_used_in_place(ai_package):
    assert acquire(ai_package) == checkout_dir(ai_package)


def test_missing_local_source_raises(missing_package):
    with pytest.raises(AcquisitionError, match="local source not found"):
        acquire(missing_package)


def test_clone_is_shallow_and_pinned(tmp_path, monkeypatch):
    git = FakeGit()
    monkeypatch.setattr(acquire_module.subprocess, "run", git)
    root = acquire(REMOTE, downloads_dir=tmp_path)

    assert root == tmp_path / "fi"
    assert git.calls == [[
        "git", "clone", "--depth", "1", "--branch", "v4.29.1", REMOTE.source, str(tmp_path / "fi"),
    ]]


def test_existing_checkout_is_reused(tmp_path, monkeypatch):
    git = FakeGit()
    monkeypatch.setattr(acquire_module.subprocess, "run", git)
    acquire(REMOTE, downloads_dir=tmp_path)
    acquire(REMOTE, downloads_dir=tmp_path)
    assert len(git.calls) == 1


def test_clean_refetches(tmp_path, monkeypatch):
    git = FakeGit()
    monkeypatch.setattr(acquire_module.subprocess, "run", git)
    acquire(REMOTE, downloads_dir=tmp_path)
    (tmp_path / "fi" / "stale.svg").write_text("old")

    acquire(REMOTE, downloads_dir=tmp_path, clean=True)
    assert len(git.calls) == 2
    assert not (tmp_path / "fi" / "stale.svg").exists()


def test_git_failure_raises(tmp_path, monkeypatch):
    monkeypatch.setattr(acquire_module.subprocess, "run", FakeGit(returncode=128, stderr="not found"))
    with pytest.raises(AcquisitionError, match="exited with 128: not found"):
        acquire(REMOTE, downloads_dir=tmp_path)


def test_git_timeout_raises(tmp_path, monkeypatch):
    def timeout(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, 1)

    monkeypatch.setattr(acquire_module.subprocess, "run", timeout)
    with pytest.raises(AcquisitionError, match="git clone failed"):
        acquire(REMOTE, downloads_dir=tmp_path)
