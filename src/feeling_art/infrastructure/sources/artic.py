"""
Art Institute of Chicago API Client

API Documentation: https://api.artic.edu/docs/

A single search call returns inlined records restricted to the requested
fields; no detail fetch is needed. Image URLs are built from ``image_id``
through the IIIF image service.
"""

from __future__ import annotations

import logging
from typing import Any

from feeling_art.domain.entities.artwork import ArtworkItem, ArtworkSource
from feeling_art.infrastructure.sources.base_client import BaseAPIClient

logger = logging.getLogger(__name__)

# AIC API endpoints
AIC_API_BASE = "https://api.artic.edu/api/v1"
AIC_SEARCH_URL = f"{AIC_API_BASE}/artworks/search"
AIC_IIIF_BASE = "https://www.artic.edu/iiif/2"
AIC_PAGE_URL = "https://www.artic.edu/artworks"

AIC_FIELDS = "id,title,artist_display,date_display,image_id"
AIC_MAX_PAGE_SIZE = 100  # Larger limits are rejected by the API
ID_PREFIX = "aic-"


def iiif_image_url(image_id: str) -> str:
    """843px-wide JPEG rendition of an AIC image."""
    return f"{AIC_IIIF_BASE}/{image_id}/full/843,/0/default.jpg"


class ArtInstituteClient(BaseAPIClient):
    """
    Art Institute of Chicago API client (Provider B).

    Usage:
        async with ArtInstituteClient() as client:
            items = await client.search("twilight", limit=50)
    """

    _service_name = "AIC"

    async def search(self, query: str, limit: int) -> list[ArtworkItem]:
        """
        Search AIC artworks.

        Args:
            query: Space-separated search terms
            limit: Maximum results (clamped to the API page size)

        Returns:
            Normalized items in provider order

        Raises:
            TransportError: The search call failed
            ParseError: The search response was not JSON
        """
        params = {
            "q": query,
            "fields": AIC_FIELDS,
            "limit": str(max(1, min(limit, AIC_MAX_PAGE_SIZE))),
        }
        data = await self._get_json(AIC_SEARCH_URL, params=params)
        records = (data.get("data") if isinstance(data, dict) else None) or []

        items = [item for item in (self._normalize_record(r) for r in records) if item is not None]
        logger.info(f"AIC: '{query}' → {len(records)} records, {len(items)} with images")
        return items

    @staticmethod
    def _normalize_record(record: Any) -> ArtworkItem | None:
        """Map an AIC record to ArtworkItem (None without an image)."""
        if not isinstance(record, dict):
            return None
        image_id = record.get("image_id")
        native_id = record.get("id")
        if not image_id or native_id is None:
            return None

        return ArtworkItem(
            id=f"{ID_PREFIX}{native_id}",
            title=record.get("title") or "",
            artist=record.get("artist_display") or "Unknown",
            date=record.get("date_display") or "",
            image_url=iiif_image_url(image_id),
            detail_url=f"{AIC_PAGE_URL}/{native_id}",
            source=ArtworkSource.AIC,
        )
