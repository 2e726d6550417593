"""
Shared fixtures for the test suite.
"""

import os
import subprocess
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from soos_sast_docker.config import ENVIRONMENT_FALLBACKS


REQUIRED_ARGS = ["--clientId", "client-123", "--apiKey", "key-secret", "--projectName", "my-app"]


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run every test from an empty directory with no SOOS_* variables set."""
    monkeypatch.chdir(tmp_path)
    for variable in ENVIRONMENT_FALLBACKS.values():
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    return tmp_path


class FakeRun:
    """Stands in for subprocess.run, returning queued exit codes."""

    def __init__(self, exit_codes=None, error=None):
        self.exit_codes = list(exit_codes or [])
        self.error = error
        self.calls = []

    def __call__(self, args, check=False, **kwargs):
        self.calls.append(list(args))
        if self.error is not None:
            raise self.error
        code = self.exit_codes.pop(0) if self.exit_codes else 0
        return subprocess.CompletedProcess(args, code)


@pytest.fixture
def fake_run(monkeypatch):
    """Install a FakeRun; call it with exit codes to queue them."""
    def install(exit_codes=None, error=None):
        runner = FakeRun(exit_codes, error)
        monkeypatch.setattr("soos_sast_docker.core.process.subprocess.run", runner)
        return runner
    return install
