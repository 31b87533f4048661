import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("JOKEAPI_BASE_URL", "JOKEAPI_TIMEOUT", "JOKETELLER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
