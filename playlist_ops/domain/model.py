"""Pure domain objects, no framework dependency."""

from dataclasses import dataclass
from typing import Iterator, Optional

Playlist = dict[str, str]  # artist name -> song title

SEED_PLAYLIST: Playlist = {"LilDurk": "Chiraqimony"}


@dataclass(frozen=True)
class PlaylistEntry:
    artist: str
    title: str


def new_playlist(seed: Optional[Playlist] = None) -> Playlist:
    """Return a fresh mutable playlist seeded with a copy of ``seed``."""
    return dict(SEED_PLAYLIST if seed is None else seed)


def entries(playlist: Playlist) -> Iterator[PlaylistEntry]:
    for artist, title in playlist.items():
        yield PlaylistEntry(artist=artist, title=title)
