# core/config.py
import dataclasses
import logging
import os

from dotenv import load_dotenv

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_FILE = "dev.env"

CLIENT_ID_VAR = "SPOTIFY_CLIENT_ID"
CLIENT_SECRET_VAR = "SPOTIFY_CLIENT_SECRET"

# Seconds allowed for the connect and for each read of a search request.
# requests has no deadline for the whole response, so a server trickling
# bytes can take longer.
SEARCH_TIMEOUT = 10
# Spotify rejects larger page sizes on /v1/search
MAX_SEARCH_LIMIT = 50


@dataclasses.dataclass(frozen=True)
class Credentials:
    client_id: str
    client_secret: str = dataclasses.field(repr=False)


def load_env_file(path=ENV_FILE):
    """
    Loads variables from a local env file without overriding ones already set.
    Returns True if the file exists, even when it sets nothing.
    """
    if not os.path.isfile(path):
        logger.warning("Env file %s not found, using the process environment.", path)
        return False
    load_dotenv(path, override=False)
    logger.debug("Loaded env file %s.", path)
    return True


def load_credentials() -> Credentials:
    client_id = (os.getenv(CLIENT_ID_VAR) or "").strip()
    client_secret = (os.getenv(CLIENT_SECRET_VAR) or "").strip()

    missing = [name for name, value in ((CLIENT_ID_VAR, client_id), (CLIENT_SECRET_VAR, client_secret)) if not value]
    if missing:
        raise ConfigError(f"{' and '.join(missing)} must be set")

    return Credentials(client_id=client_id, client_secret=client_secret)


def log_level() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
