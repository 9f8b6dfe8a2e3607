import pytest

from sigstats.config import reset_settings
from sigstats.core import reset_registry


@pytest.fixture(autouse=True)
def fresh_globals(monkeypatch):
    """Every test starts from packaged defaults and a fresh registry."""
    monkeypatch.delenv('SIGSTATS_CONFIG', raising=False)
    reset_settings()
    reset_registry()
    yield
    reset_settings()
    reset_registry()
