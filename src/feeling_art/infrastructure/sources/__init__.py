"""
Art collection provider clients.

Every client exposes the same coroutine:

    async def search(query: str, limit: int) -> list[ArtworkItem]

- MetMuseumClient: two-step search (ids, then concurrent detail fetches),
  painting-first ordering
- ArtInstituteClient: single search call with inlined records
"""

from __future__ import annotations

from typing import Protocol

from feeling_art.domain.entities.artwork import ArtworkItem

from .artic import ArtInstituteClient
from .base_client import BaseAPIClient
from .met import MetMuseumClient, paintings_first


class ArtworkProvider(Protocol):
    """Interface shared by provider clients."""

    @property
    def name(self) -> str: ...

    async def search(self, query: str, limit: int) -> list[ArtworkItem]: ...


__all__ = [
    "ArtInstituteClient",
    "ArtworkProvider",
    "BaseAPIClient",
    "MetMuseumClient",
    "paintings_first",
]
