import pytest
from requests_mock import Mocker

from core.config import CLIENT_ID_VAR, CLIENT_SECRET_VAR
from core.spotify_client import SpotifyService, get_spotify_client
from tests.utils import TOKEN_URL


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Run every test without real credentials and away from any dev.env in the repo."""
    for name in (CLIENT_ID_VAR, CLIENT_SECRET_VAR, "LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def credentials_env(monkeypatch):
    monkeypatch.setenv(CLIENT_ID_VAR, "test-client-id")
    monkeypatch.setenv(CLIENT_SECRET_VAR, "test-client-secret")


@pytest.fixture
def token(requests_mock: Mocker) -> dict:
    """Answer the client-credentials exchange with a valid token"""
    response = {"access_token": "fake access token", "token_type": "Bearer", "expires_in": 3600}
    requests_mock.post(TOKEN_URL, json=response)
    return response


@pytest.fixture
def service() -> SpotifyService:
    return SpotifyService(get_spotify_client("fake access token"))
