"""In-process registry of upload strategies, keyed by name."""

from __future__ import annotations

from typing import Any

from . import classic
from .base import AbstractUpload
from .descriptor import UploadDescriptor


class UploadRegistry:
    def __init__(self) -> None:
        self._descriptors: dict[str, UploadDescriptor] = {}

    def register(self, descriptor: UploadDescriptor) -> None:
        if descriptor.name in self._descriptors:
            raise ValueError(f"Upload strategy already registered: {descriptor.name}")
        self._descriptors[descriptor.name] = descriptor

    def get(self, name: str) -> UploadDescriptor:
        try:
            return self._descriptors[name]
        except KeyError:
            raise KeyError(f"Unknown upload strategy: {name}") from None

    def names(self) -> list[str]:
        return sorted(self._descriptors)

    def descriptors(self) -> list[UploadDescriptor]:
        return [self._descriptors[n] for n in self.names()]

    def create(self, name: str, **fields: Any) -> AbstractUpload:
        return self.get(name).create(**fields)


REGISTRY = UploadRegistry()
REGISTRY.register(classic.DESCRIPTOR)


def default_registry() -> UploadRegistry:
    """Registry holding the built-in strategies, filled once at import."""
    return REGISTRY
