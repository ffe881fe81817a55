import pytest

from freetable_mcp.config import reset_settings
from tests.factories import BASE_URL, FakeBackend


@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch):
    """Point every test at a fake backend URL and start from fresh settings."""
    monkeypatch.setenv("FREETABLE_API_BASE", BASE_URL)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def backend() -> FakeBackend:
    """Scriptable FreeTable backend recording every request it receives."""
    return FakeBackend()
