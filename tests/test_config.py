from tokbox.config import DEFAULT_API_HOST, Settings, get_settings
from tokbox.models.session_model import CredentialPair


def test_settings_read_environment():
    settings = get_settings()
    assert settings.tokbox_key == "k1"
    assert settings.tokbox_secret == "s1"
    assert settings.tokbox_api_host == "https://api.opentok.test"


def test_blank_host_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("TOKBOX_API_HOST", "  ")
    assert Settings().tokbox_api_host == DEFAULT_API_HOST


def test_credentials_from_settings_hide_secret():
    credentials = CredentialPair.from_settings(get_settings())
    assert credentials.auth_header == "k1:s1"
    assert "s1" not in repr(credentials)
