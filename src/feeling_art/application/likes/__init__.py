"""Liked artworks."""

from __future__ import annotations

from .store import InMemoryLikesStore, JsonLikesStore, LikesStore

__all__ = [
    "InMemoryLikesStore",
    "JsonLikesStore",
    "LikesStore",
]
