"""Root test configuration: isolate every test from host config and env"""

import os

import pytest

from mdrender.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run from a clean tmp directory with no MDRENDER_* variables set."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
