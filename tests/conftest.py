import os
import time

import pytest

from pagesnap.config import get_config
from pagesnap.console import console


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Run every test in an empty directory with no PAGESNAP_* settings."""
    for key in list(os.environ):
        if key.upper().startswith("PAGESNAP_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()
    yield
    get_config.cache_clear()
    console.quiet = True


@pytest.fixture
def local_tz(monkeypatch):
    """Switch the process local time zone, e.g. local_tz("UTC")."""

    def set_tz(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield set_tz
    monkeypatch.undo()
    time.tzset()
