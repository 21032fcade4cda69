"""Shared pytest fixtures for the gonesis test suite.

Provides reusable fixtures for:
- Configurations pointing at a temporary output directory
- A fake ``go`` command runner for unit tests
- A fake ``go`` executable for end-to-end runs
- Captured Rich consoles and scripted stdin streams
"""

from __future__ import annotations

import io
import os
import stat
import sys
from pathlib import Path

import pytest
from rich.console import Console

from gonesis.config import Config, ToolchainConfig
from gonesis.scaffolder import ScaffoldRequest


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_gonesis_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the operator's GONESIS_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("GONESIS_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Fake go toolchain
# ---------------------------------------------------------------------------

class FakeGo:
    """Stands in for ``run_command`` when the command is ``go mod init``.

    Writes ``go.mod`` into the working directory like the real tool and
    fails with exit status 1 when one is already there.
    """

    def __init__(self, returncode: int | None = None) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.forced_returncode = returncode

    def __call__(self, cmd, cwd=None, capture=True, env=None):
        workdir = Path(cwd) if cwd else Path.cwd()
        self.calls.append((list(cmd), workdir))
        if self.forced_returncode is not None:
            return (self.forced_returncode, "", "forced failure")
        manifest = workdir / "go.mod"
        if manifest.exists():
            return (1, "", f"go: {manifest}: already exists")
        manifest.write_text(f"module {cmd[-1]}\n\ngo 1.21\n", encoding="utf-8")
        return (0, "", f"go: creating new go.mod: module {cmd[-1]}")


@pytest.fixture
def fake_go() -> FakeGo:
    return FakeGo()


@pytest.fixture
def failing_go() -> FakeGo:
    """A go runner that always exits with status 1."""
    return FakeGo(returncode=1)


_FAKE_GO_SCRIPT = """#!/bin/sh
if [ "$1 $2" != "mod init" ]; then
    echo "unexpected arguments: $*" >&2
    exit 2
fi
if [ -e go.mod ]; then
    echo "go: go.mod already exists" >&2
    exit 1
fi
printf 'module %s\\n\\ngo 1.21\\n' "$3" > go.mod
"""


@pytest.fixture
def fake_go_binary(tmp_path: Path) -> Path:
    """An executable shell script that behaves like ``go mod init``."""
    if sys.platform == "win32":
        pytest.skip("fake go binary is a POSIX shell script")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "go"
    script.write_text(_FAKE_GO_SCRIPT, encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


# ---------------------------------------------------------------------------
# Configuration & requests
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory the scaffolded projects are created in."""
    out = tmp_path / "workspace"
    out.mkdir()
    return out


@pytest.fixture
def config(output_dir: Path) -> Config:
    return Config(output_dir=output_dir)


@pytest.fixture
def extended_config(output_dir: Path) -> Config:
    return Config(output_dir=output_dir, layout="extended")


@pytest.fixture
def legacy_manifest_config(output_dir: Path) -> Config:
    """Runs ``go mod init`` in the output directory and moves go.mod afterwards."""
    return Config(
        output_dir=output_dir,
        toolchain=ToolchainConfig(manifest_in_root=False),
    )


@pytest.fixture
def request_all_no() -> ScaffoldRequest:
    return ScaffoldRequest(
        project_name="myapp",
        description="My application",
        account_handle="alice",
        features={"api": False, "server": False, "db": False},
    )


@pytest.fixture
def request_all_yes() -> ScaffoldRequest:
    return ScaffoldRequest(
        project_name="myapp",
        description="My application",
        account_handle="alice",
        features={"api": True, "server": True, "db": True},
    )


# ---------------------------------------------------------------------------
# Console I/O
# ---------------------------------------------------------------------------

@pytest.fixture
def quiet_console() -> Console:
    """A Rich console that records into memory instead of the terminal."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def answers():
    """Build a stdin replacement that yields the given lines, each newline-terminated."""

    def _answers(*lines: str) -> io.StringIO:
        return io.StringIO("".join(f"{line}\n" for line in lines))

    return _answers
