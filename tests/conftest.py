"""Shared in-memory adapters and fixtures for all bounded contexts."""

from typing import Optional

import pytest

from playlist_ops.domain.model import new_playlist
from playlist_ops.domain.ports import ConfigPort


# ── In-memory adapters ──────────────────────────────────────────────


class InMemoryConfig(ConfigPort):
    def __init__(self, data: Optional[dict] = None):
        self._data = data or {}

    def load(self) -> dict:
        return dict(self._data)

    def save(self, cfg: dict) -> None:
        self._data = dict(cfg)


# ── Shared fixtures ─────────────────────────────────────────────────


@pytest.fixture
def seeded_playlist():
    return new_playlist()


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setenv("PLAYLIST_OPS_CONFIG", str(path))
    return path


@pytest.fixture
def memory_config():
    return InMemoryConfig()
