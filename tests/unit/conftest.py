"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific fakes for external programs.
"""

import subprocess

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    build_index,
    minimal_config_dict,
    minimal_nav_config,
    run_cmd,
)

__all__ = [
    "FakeProcess",
    "build_index",
    "completed",
    "fake_popen",
    "minimal_config_dict",
    "minimal_nav_config",
    "run_cmd",
]


class FakeProcess:
    """Stand-in for ``subprocess.Popen`` that never runs anything."""

    _next_pid = 40000

    def __init__(self, args, **kwargs):
        FakeProcess._next_pid += 1
        self.pid = FakeProcess._next_pid
        self.args = args
        self.kwargs = kwargs
        self.returncode: int | None = None
        self.terminated = False
        self.killed = False

    def poll(self) -> int | None:
        return self.returncode

    def terminate(self) -> None:
        self.terminated = True
        self.returncode = -15

    def kill(self) -> None:
        self.killed = True
        self.returncode = -9

    def wait(self, timeout: float | None = None) -> int:  # noqa: ARG002
        if self.returncode is None:
            self.returncode = 0
        return self.returncode

    def finish(self, returncode: int = 0) -> None:
        """Simulate the program exiting on its own."""
        self.returncode = returncode


@pytest.fixture
def fake_popen(monkeypatch) -> list[FakeProcess]:
    """Replace ``subprocess.Popen``; returns the list of started fake processes."""
    started: list[FakeProcess] = []

    def popen(args, **kwargs):
        process = FakeProcess(args, **kwargs)
        started.append(process)
        return process

    monkeypatch.setattr(subprocess, "Popen", popen)
    return started


def completed(args, returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=args, returncode=returncode, stdout=stdout, stderr=stderr)
