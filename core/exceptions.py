# core/exceptions.py


class SpotifySearchError(Exception):
    """Base class for every error raised by the search client."""


class ConfigError(SpotifySearchError):
    """A required setting is missing from the environment."""


class TokenAcquisitionError(SpotifySearchError):
    """The client-credentials exchange did not produce an access token."""


class SearchError(SpotifySearchError):
    """A search request failed in transport or was rejected by the API."""


class NoResultsError(SearchError):
    """The API answered but the requested category is missing from the response."""

    def __init__(self, category):
        self.category = category
        super().__init__(f"no {category}s found")
