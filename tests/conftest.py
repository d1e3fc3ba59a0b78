"""Shared fixtures for the shell-idioms test-suite."""

import os
import sys
from pathlib import Path

import pytest

# Add src directory to path so `core`, `cli`, `adapters` import without install
src_path = str(Path(__file__).parent.parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run from an empty directory with no SHELL_IDIOMS_* variables set."""

    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("SHELL_IDIOMS_"):
            monkeypatch.delenv(key, raising=False)
    return tmp_path
