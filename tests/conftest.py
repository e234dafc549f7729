"""Shared test fixtures."""

from __future__ import annotations

import ast
import os
import stat
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest


@dataclass(slots=True)
class FakeLlvmConfig:
    """Handle on a scripted ``llvm-config`` installed on ``PATH``."""

    executable: Path
    calls_log: Path

    def calls(self) -> list[list[str]]:
        """Arguments of every invocation so far, oldest first."""

        if not self.calls_log.exists():
            return []
        return [
            ast.literal_eval(line) for line in self.calls_log.read_text("utf-8").splitlines()
        ]


def _write_fake_llvm_config(  # noqa: PLR0913
    bin_dir: Path,
    *,
    stdout: bytes,
    stderr: bytes,
    exit_code: int,
    responses: dict[str, bytes],
    calls_log: Path,
) -> Path:
    script = f"""
import sys

with open({str(calls_log)!r}, "a", encoding="utf-8") as handle:
    handle.write(repr(sys.argv[1:]) + "\\n")

responses = {responses!r}
flag = sys.argv[1] if len(sys.argv) > 1 else ""
sys.stdout.buffer.write(responses.get(flag, {stdout!r}))
sys.stdout.flush()
sys.stderr.buffer.write({stderr!r})
sys.stderr.flush()
raise SystemExit({exit_code})
"""
    implementation = bin_dir / "llvm_config_impl.py"
    implementation.write_text(script.strip() + "\n", "utf-8")

    launcher = bin_dir / "llvm-config"
    launcher.write_text(
        f'#!/usr/bin/env sh\nexec "{sys.executable}" "{implementation}" "$@"\n',
        "utf-8",
    )
    launcher.chmod(launcher.stat().st_mode | stat.S_IXUSR)
    return launcher


@pytest.fixture()
def fake_llvm_config(tmp_path: Path, monkeypatch) -> Callable[..., FakeLlvmConfig]:
    """Install a scripted ``llvm-config`` in front of ``PATH``.

    Returns a factory taking the bytes to print and the exit code. ``responses``
    overrides stdout for specific first arguments.
    """

    if os.name == "nt":
        pytest.skip("fake llvm-config launcher is a POSIX shell script")

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def _install(
        stdout: bytes = b"",
        *,
        stderr: bytes = b"",
        exit_code: int = 0,
        responses: dict[str, bytes] | None = None,
    ) -> FakeLlvmConfig:
        calls_log = tmp_path / "calls.log"
        executable = _write_fake_llvm_config(
            bin_dir,
            stdout=stdout,
            stderr=stderr,
            exit_code=exit_code,
            responses=responses or {},
            calls_log=calls_log,
        )
        return FakeLlvmConfig(executable=executable, calls_log=calls_log)

    return _install


@pytest.fixture()
def missing_llvm_config(tmp_path: Path, monkeypatch) -> None:
    """Point ``PATH`` at an empty directory so ``llvm-config`` cannot be found."""

    empty_bin = tmp_path / "empty-bin"
    empty_bin.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("PATH", str(empty_bin))
