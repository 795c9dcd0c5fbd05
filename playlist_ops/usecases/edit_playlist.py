"""Use case: add or remove playlist entries."""

import logging
from typing import Optional

from playlist_ops.domain.model import Playlist, new_playlist
from playlist_ops.domain.playlist import remove_from_playlist, update_playlist

logger = logging.getLogger("playlist_ops.usecases")


class EditPlaylistUseCase:

    def __init__(self, playlist: Optional[Playlist] = None):
        self.playlist = new_playlist() if playlist is None else playlist

    def add(self, artist_name: str, song_title: str) -> Playlist:
        previous = self.playlist.get(artist_name)
        replaced = artist_name in self.playlist
        update_playlist(self.playlist, artist_name, song_title)
        if replaced:
            logger.info(
                "Playlist entry replaced (artist=%s, title=%s, previous=%s)",
                artist_name,
                song_title,
                previous,
            )
        else:
            logger.info("Playlist entry added (artist=%s, title=%s)", artist_name, song_title)
        return self.playlist

    def remove(self, artist_name: str) -> bool:
        removed = remove_from_playlist(self.playlist, artist_name)
        if removed:
            logger.info("Playlist entry removed (artist=%s)", artist_name)
        else:
            logger.debug("Artist not in playlist, nothing removed (artist=%s)", artist_name)
        return removed
