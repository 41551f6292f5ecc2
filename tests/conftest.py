"""Root test configuration: isolate tests from the developer's environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Remove MDTAILOR_* variables so settings come only from each test's setup."""
    for name in list(os.environ):
        if name.startswith("MDTAILOR_"):
            monkeypatch.delenv(name, raising=False)
