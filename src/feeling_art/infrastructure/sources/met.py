"""
The Metropolitan Museum of Art Collection API Client

API Documentation: https://metmuseum.github.io/

Search is two-step:
1. /search?q=...&hasImages=true returns a bare list of objectIDs
2. /objects/{id} returns the full record, fetched per id

All detail fetches of one search are issued concurrently and awaited as a
batch. Records that fail to load or have no primaryImageSmall are skipped.
Results are reordered so painted works come first.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from feeling_art.domain.entities.artwork import ArtworkItem, ArtworkSource
from feeling_art.infrastructure.sources.base_client import BaseAPIClient

logger = logging.getLogger(__name__)

# Met API endpoints
MET_API_BASE = "https://collectionapi.metmuseum.org/public/collection/v1"
MET_SEARCH_URL = f"{MET_API_BASE}/search"
MET_OBJECTS_URL = f"{MET_API_BASE}/objects"
MET_PAGE_URL = "https://www.metmuseum.org/art/collection/search"


def paintings_first(items: list[ArtworkItem]) -> list[ArtworkItem]:
    """Stable partition: painted works, then everything else."""
    paintings = [item for item in items if item.is_painting]
    others = [item for item in items if not item.is_painting]
    return paintings + others


class MetMuseumClient(BaseAPIClient):
    """
    Met Collection API client (Provider A).

    Usage:
        async with MetMuseumClient() as client:
            items = await client.search("painting landscape sea", limit=48)
    """

    _service_name = "Met"

    async def search(self, query: str, limit: int) -> list[ArtworkItem]:
        """
        Search the Met collection.

        Args:
            query: Space-separated search terms
            limit: Maximum number of object ids to resolve and items to return

        Returns:
            Normalized items, paintings first

        Raises:
            TransportError: The search call failed
            ParseError: The search response was not JSON
        """
        data = await self._get_json(MET_SEARCH_URL, params={"q": query, "hasImages": "true"})
        # objectIDs is null when nothing matches
        object_ids = (data.get("objectIDs") if isinstance(data, dict) else None) or []
        object_ids = object_ids[:limit]
        if not object_ids:
            logger.info(f"Met: no objects for '{query}'")
            return []

        records = await asyncio.gather(*(self._fetch_object(object_id) for object_id in object_ids))
        items = [item for item in records if item is not None]
        logger.info(f"Met: '{query}' → {len(object_ids)} ids, {len(items)} usable items")
        return paintings_first(items)[:limit]

    async def _fetch_object(self, object_id: int | str) -> ArtworkItem | None:
        """Fetch and normalize one object; None when it cannot be used."""
        obj = await self._get_json_or_none(f"{MET_OBJECTS_URL}/{object_id}")
        if not isinstance(obj, dict):
            return None
        return self._normalize_object(obj)

    @staticmethod
    def _normalize_object(obj: dict[str, Any]) -> ArtworkItem | None:
        """Map a Met object record to ArtworkItem (None without an image)."""
        image_url = obj.get("primaryImageSmall")
        object_id = obj.get("objectID")
        if not image_url or object_id is None:
            return None

        return ArtworkItem(
            id=str(object_id),
            title=obj.get("title") or "",
            artist=obj.get("artistDisplayName") or "Unknown",
            date=str(obj.get("objectDate") or obj.get("objectBeginDate") or ""),
            image_url=image_url,
            detail_url=obj.get("objectURL") or f"{MET_PAGE_URL}/{object_id}",
            medium=obj.get("medium") or "",
            classification=obj.get("classification") or "",
            source=ArtworkSource.MET,
        )
