import pytest

from tokbox.config import get_settings
from tokbox.models.session_model import CredentialPair, Session


@pytest.fixture(autouse=True)
def _tokbox_env(monkeypatch):
    monkeypatch.setenv("TOKBOX_KEY", "k1")
    monkeypatch.setenv("TOKBOX_SECRET", "s1")
    monkeypatch.setenv("TOKBOX_API_HOST", "https://api.opentok.test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def credentials():
    return CredentialPair(api_key="k1", partner_secret="s1")


@pytest.fixture
def session(credentials):
    return Session(session_id="abc123", partner_id="k1", credentials=credentials)
