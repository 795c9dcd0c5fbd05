"""Configuration: the seed playlist the process starts with."""

import logging
from typing import Optional

from playlist_ops.adapters.config.json_config_adapter import JsonConfigAdapter
from playlist_ops.domain.ports import ConfigPort

logger = logging.getLogger("playlist_ops.config")

_cfg = JsonConfigAdapter().load()


def reload(port: Optional[ConfigPort] = None):
    """Reload config from ``port`` (the JSON config file by default)."""
    global _cfg, SEED_PLAYLIST
    _cfg = (port or JsonConfigAdapter()).load()
    SEED_PLAYLIST = _cfg["seed_playlist"]
    logger.info("Config reloaded (seed_entries=%s)", len(SEED_PLAYLIST))


SEED_PLAYLIST = _cfg["seed_playlist"]
