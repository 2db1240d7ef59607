"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import numtasks...' and
'import actions...' work without installing the package, and that every
test starts from freshly loaded settings.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from numtasks.config.settings import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Clear cached settings and NUMTASKS_* variables around each test."""
    for name in (
        "NUMTASKS_ROUNDING_MODE",
        "NUMTASKS_FLOAT_PRECISION",
        "NUMTASKS_LOG_LEVEL",
        "NUMTASKS_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
