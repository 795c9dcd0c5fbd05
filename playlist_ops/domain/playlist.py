"""Mutations on an in-memory playlist (artist name -> song title)."""

from playlist_ops.domain.model import Playlist


def update_playlist(playlist: Playlist, artist_name: str, song_title: str) -> Playlist:
    """Insert or overwrite the entry for ``artist_name``.

    Mutates ``playlist`` in place and returns the same object, so the last
    write for a given artist wins.
    """
    playlist[artist_name] = song_title
    return playlist


def remove_from_playlist(playlist: Playlist, artist_name: str) -> bool:
    """Remove the entry keyed by ``artist_name``.

    Returns True if an entry was removed, False if the artist was not present.
    """
    if artist_name not in playlist:
        return False
    del playlist[artist_name]
    return True
