"""Ports (interfaces) for the hexagonal architecture."""

from abc import ABC, abstractmethod


class ConfigPort(ABC):
    @abstractmethod
    def load(self) -> dict:
        ...

    @abstractmethod
    def save(self, cfg: dict) -> None:
        ...
