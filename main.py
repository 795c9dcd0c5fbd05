"""Entry point for playlist-ops: build the process playlist and print it."""

import logging
import os
import sys


def _log_level(name: str) -> int | None:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None


def main():
    level_name = os.getenv("PLAYLIST_OPS_LOG_LEVEL", "INFO")
    level = _log_level(level_name)
    logging.basicConfig(
        level=level if level is not None else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("playlist_ops.main")
    if level is None:
        logger.warning("Unknown log level %r, using INFO", level_name)

    try:
        from playlist_ops import config
        config.reload()
    except ValueError as e:
        print(f"Invalid config: {e}")
        print("Check your config.json (seed_playlist)")
        sys.exit(1)

    from playlist_ops.domain.model import entries, new_playlist
    from playlist_ops.usecases.edit_playlist import EditPlaylistUseCase

    editor = EditPlaylistUseCase(new_playlist(config.SEED_PLAYLIST))
    logger.info("Playlist ready (entries=%s)", len(editor.playlist))
    for entry in entries(editor.playlist):
        print(f"{entry.artist}: {entry.title}")


if __name__ == "__main__":
    main()
