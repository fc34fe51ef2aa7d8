TOKEN_URL = "https://accounts.spotify.com/api/token"
SEARCH_URL = "https://api.spotify.com/v1/search"


def track_item(name="Song A", artists=("Artist A",), album="Album A", duration_ms=185000, popularity=42, id="track-a"):
    return {
        "id": id,
        "name": name,
        "artists": [{"id": f"{a.lower()}-id", "name": a} for a in artists],
        "album": {"id": f"{album.lower()}-id", "name": album},
        "duration_ms": duration_ms,
        "popularity": popularity,
    }


def artist_item(name="Artist A", genres=("pop", "rock"), popularity=70, id="artist-a"):
    return {
        "id": id,
        "name": name,
        "genres": list(genres),
        "popularity": popularity,
    }


def tracks_page(*items):
    return {"tracks": {"items": list(items), "total": len(items), "limit": max(len(items), 1), "offset": 0}}


def artists_page(*items):
    return {"artists": {"items": list(items), "total": len(items), "limit": max(len(items), 1), "offset": 0}}
