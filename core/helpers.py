from datetime import timedelta
from typing import Iterable, Sequence

from rich.console import Console

from core.models import Artist, Track

console = Console()

RULE = "=" * 40
SEPARATOR = "-" * 40


def format_duration(duration: timedelta) -> str:
    """Renders a duration as m:ss, dropping fractions of a second."""
    minutes, seconds = divmod(int(duration.total_seconds()), 60)
    return f"{minutes}:{seconds:02d}"


def join_names(names: Iterable[str]) -> str:
    return ", ".join(names)


def format_tracks(tracks: Sequence[Track]) -> str:
    lines = ["", "Найденные треки:", RULE]
    for i, track in enumerate(tracks, 1):
        lines.append(f"{i}. {track.name} - {join_names(track.artists)}")
        lines.append(f"   Альбом: {track.album}")
        lines.append(f"   Длительность: {format_duration(track.duration)}")
        lines.append(f"   ID: {track.id}")
        lines.append(f"   Популярность: {track.popularity}/100")
        lines.append(SEPARATOR)
    return "\n".join(lines)


def format_artists(artists: Sequence[Artist]) -> str:
    lines = ["", "Найденные артисты:", RULE]
    for i, artist in enumerate(artists, 1):
        lines.append(f"{i}. {artist.name}")
        lines.append(f"   Жанры: {join_names(artist.genres)}")
        lines.append(f"   Популярность: {artist.popularity}/100")
        lines.append(f"   ID: {artist.id}")
        lines.append(SEPARATOR)
    return "\n".join(lines)


def _print_plain(text, out=None):
    # Names come straight from the API and may contain [brackets]
    (out or console).print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


def print_tracks(tracks, out=None):
    _print_plain(format_tracks(tracks), out)


def print_artists(artists, out=None):
    _print_plain(format_artists(artists), out)
