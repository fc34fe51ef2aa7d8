# core/spotify_client.py
import logging

import requests
import spotipy
from spotipy.cache_handler import MemoryCacheHandler
from spotipy.exceptions import SpotifyException, SpotifyOauthError
from spotipy.oauth2 import SpotifyClientCredentials

from core.config import MAX_SEARCH_LIMIT, SEARCH_TIMEOUT, Credentials, load_credentials
from core.exceptions import NoResultsError, SearchError, TokenAcquisitionError
from core.models import Artist, Track

logger = logging.getLogger(__name__)


def acquire_token(credentials: Credentials) -> str:
    """
    Exchanges the client credentials for a bearer token.
    The token lives only in memory and is never refreshed.
    """
    auth_manager = SpotifyClientCredentials(
        client_id=credentials.client_id,
        client_secret=credentials.client_secret,
        cache_handler=MemoryCacheHandler(),
    )
    try:
        token = auth_manager.get_access_token(as_dict=False)
    except (SpotifyOauthError, requests.exceptions.RequestException) as exc:
        raise TokenAcquisitionError(f"couldn't get token: {exc}") from exc

    if not token:
        raise TokenAcquisitionError("couldn't get token: empty response")

    logger.debug("Access token acquired.")
    return token


def get_spotify_client(token: str) -> spotipy.Spotify:
    return spotipy.Spotify(
        auth=token,
        requests_timeout=SEARCH_TIMEOUT,
        retries=0,
        status_retries=0,
    )


class SpotifyService:
    """
    Read-only search over an already authenticated Spotify client.
    """

    def __init__(self, client: spotipy.Spotify):
        self.sp = client

    @classmethod
    def from_env(cls) -> "SpotifyService":
        credentials = load_credentials()
        token = acquire_token(credentials)
        logger.info("Spotify client initialized.")
        return cls(get_spotify_client(token))

    def search_tracks(self, query: str, limit: int) -> list[Track]:
        items = self._search(query, limit, "track")
        return [Track.from_item(item) for item in items]

    def search_artists(self, query: str, limit: int) -> list[Artist]:
        items = self._search(query, limit, "artist")
        return [Artist.from_item(item) for item in items]

    def _search(self, query: str, limit: int, category: str) -> list[dict]:
        if not query or not query.strip():
            raise ValueError("query must not be empty")
        if not 1 <= limit <= MAX_SEARCH_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_SEARCH_LIMIT}, got {limit}")

        logger.debug("Searching %ss for %r (limit=%d).", category, query, limit)
        try:
            result = self.sp.search(q=query, limit=limit, type=category)
        except (SpotifyException, requests.exceptions.RequestException) as exc:
            raise SearchError(f"search failed: {exc}") from exc

        page = result.get(f"{category}s") if isinstance(result, dict) else None
        if not isinstance(page, dict) or not isinstance(page.get("items"), list):
            raise NoResultsError(category)

        # The search endpoint sometimes pads items with nulls
        return [item for item in page["items"] if isinstance(item, dict)]
