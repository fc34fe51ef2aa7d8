# cli/main.py
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from core.config import ENV_FILE, load_env_file, log_level
from core.exceptions import ConfigError, SearchError, TokenAcquisitionError
from core.helpers import print_artists, print_tracks
from core.spotify_client import SpotifyService

app = typer.Typer(help="Spotify Search CLI")
logger = logging.getLogger(__name__)

TRACK_QUERY = "надо было ставить линукс"
TRACK_LIMIT = 1
ARTIST_QUERY = "cupsize"
ARTIST_LIMIT = 3


def setup_logging():
    logging.basicConfig(
        level=log_level(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def search():
    """Search Spotify for one track and a few artists and print what was found."""
    setup_logging()
    load_env_file(ENV_FILE)

    try:
        service = SpotifyService.from_env()
    except (ConfigError, TokenAcquisitionError) as e:
        logger.critical("Ошибка создания сервиса: %s", e)
        raise typer.Exit(code=1)

    try:
        tracks = service.search_tracks(TRACK_QUERY, TRACK_LIMIT)
    except SearchError as e:
        logger.error("Ошибка поиска треков: %s", e)
    else:
        print_tracks(tracks)

    try:
        artists = service.search_artists(ARTIST_QUERY, ARTIST_LIMIT)
    except SearchError as e:
        logger.error("Ошибка поиска артистов: %s", e)
    else:
        print_artists(artists)


if __name__ == "__main__":
    app()
