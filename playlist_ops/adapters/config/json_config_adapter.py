"""JSON file-based config adapter."""

import json
import os
import sys

from playlist_ops.domain.model import SEED_PLAYLIST
from playlist_ops.domain.ports import ConfigPort

CONFIG_ENV_VAR = "PLAYLIST_OPS_CONFIG"

_DEFAULTS = {
    "seed_playlist": dict(SEED_PLAYLIST),
}


def _config_dir() -> str:
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.getcwd()


def _default_path() -> str:
    return os.getenv(CONFIG_ENV_VAR) or os.path.join(_config_dir(), "config.json")


def _check_seed(seed) -> dict:
    if not isinstance(seed, dict):
        raise ValueError(f"seed_playlist must be an object, got {type(seed).__name__}")
    for artist, title in seed.items():
        if not isinstance(artist, str) or not isinstance(title, str):
            raise ValueError(f"seed_playlist entries must map text to text (artist={artist!r})")
    return dict(seed)


class JsonConfigAdapter(ConfigPort):

    def __init__(self, path: str | None = None):
        self.path = path or _default_path()

    def load(self) -> dict:
        cfg = dict(_DEFAULTS)
        if os.path.exists(self.path):
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"config.json must contain an object, got {type(data).__name__}")
            cfg.update(data)

        cfg["seed_playlist"] = _check_seed(cfg["seed_playlist"])
        return cfg

    def save(self, cfg: dict) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(cfg, f, ensure_ascii=False, indent=2)
