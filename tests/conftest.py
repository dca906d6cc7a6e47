"""pytest global fixtures: environment and dataset cache isolation."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Use the packaged dataset and default settings regardless of the host env."""
    monkeypatch.delenv("TRIPPLAN_DATA_FILE", raising=False)
    monkeypatch.delenv("TRIPPLAN_DEFAULT_LOCALE", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.delenv("ENABLE_DOCS", raising=False)
    from tripplan.adapters.poi import reset_cache

    reset_cache()
    yield
    reset_cache()
