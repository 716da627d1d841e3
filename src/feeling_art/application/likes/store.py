"""
Liked Artworks - persisted favorites keyed by ArtworkItem.id.

Provides:
- LikesStore protocol (membership + toggle semantics used by the UI)
- InMemoryLikesStore for tests and stateless servers
- JsonLikesStore persisting to <data_dir>/likes.json

Stores keep insertion order, so list() returns items in the order they
were liked.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from feeling_art.domain.entities.artwork import ArtworkItem

logger = logging.getLogger(__name__)

LIKES_FILENAME = "likes.json"


class LikesStore(Protocol):
    """Collaborator interface for liked items."""

    def load(self) -> None: ...

    def save(self) -> None: ...

    def contains(self, artwork_id: str) -> bool: ...

    def get(self, artwork_id: str) -> ArtworkItem | None: ...

    def add(self, item: ArtworkItem) -> None: ...

    def remove(self, artwork_id: str) -> bool: ...

    def toggle(self, item: ArtworkItem) -> bool: ...

    def list(self) -> list[ArtworkItem]: ...


class InMemoryLikesStore:
    """Likes kept in memory only."""

    def __init__(self) -> None:
        self._items: dict[str, ArtworkItem] = {}

    def load(self) -> None:
        pass

    def save(self) -> None:
        pass

    def contains(self, artwork_id: str) -> bool:
        return artwork_id in self._items

    def get(self, artwork_id: str) -> ArtworkItem | None:
        return self._items.get(artwork_id)

    def add(self, item: ArtworkItem) -> None:
        if item.id not in self._items:
            self._items[item.id] = item
            self.save()

    def remove(self, artwork_id: str) -> bool:
        if self._items.pop(artwork_id, None) is None:
            return False
        self.save()
        return True

    def toggle(self, item: ArtworkItem) -> bool:
        """
        Like *item* if not liked yet, otherwise unlike it.

        Returns:
            True if the item is liked after the call
        """
        if self.contains(item.id):
            self.remove(item.id)
            return False
        self.add(item)
        return True

    def list(self) -> list[ArtworkItem]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)


class JsonLikesStore(InMemoryLikesStore):
    """
    Likes persisted as a JSON list in a data directory.

    Every mutation rewrites the file. A missing or unreadable file loads as
    an empty store.
    """

    def __init__(self, data_dir: str | Path):
        super().__init__()
        self.data_dir = Path(data_dir).expanduser()
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.load()

    @property
    def path(self) -> Path:
        return self.data_dir / LIKES_FILENAME

    def load(self) -> None:
        """Load likes from disk."""
        self._items = {}
        if not self.path.exists():
            return
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
                raise ValueError("expected a JSON list of artworks")
            items = [ArtworkItem.from_dict(entry) for entry in data]
            self._items = {item.id: item for item in items}
            logger.info(f"Loaded {len(self._items)} liked artworks")
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Failed to load likes from {self.path}: {e}")

    def save(self) -> None:
        """Save likes to disk."""
        data = [item.to_dict() for item in self._items.values()]
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
