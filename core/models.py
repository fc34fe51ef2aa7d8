# core/models.py

import dataclasses
from datetime import timedelta
from typing import Tuple


@dataclasses.dataclass(frozen=True)
class Track:
    """
    A track as returned by the search endpoint.
    """
    id: str
    name: str
    artists: Tuple[str, ...]
    album: str
    duration_ms: int
    popularity: int

    @property
    def duration(self) -> timedelta:
        return timedelta(milliseconds=self.duration_ms)

    @classmethod
    def from_item(cls, item: dict) -> "Track":
        return cls(
            id=item.get("id") or "",
            name=item.get("name") or "",
            artists=tuple(a.get("name", "") for a in item.get("artists") or []),
            album=(item.get("album") or {}).get("name") or "",
            duration_ms=item.get("duration_ms") or 0,
            popularity=item.get("popularity") or 0,
        )


@dataclasses.dataclass(frozen=True)
class Artist:
    """
    An artist as returned by the search endpoint.
    """
    id: str
    name: str
    genres: Tuple[str, ...]
    popularity: int

    @classmethod
    def from_item(cls, item: dict) -> "Artist":
        return cls(
            id=item.get("id") or "",
            name=item.get("name") or "",
            genres=tuple(item.get("genres") or []),
            popularity=item.get("popularity") or 0,
        )
