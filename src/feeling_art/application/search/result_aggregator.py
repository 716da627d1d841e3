"""
ResultAggregator - Cross-provider merging and deduplication.

Architecture Decision:
    ResultAggregator operates on ArtworkItem objects.
    It does NOT make API calls and does NOT re-rank: the first provider's
    ordering (including the Met painting-first bias) is kept, and the
    second provider's items follow.

Example:
    >>> aggregator = ResultAggregator()
    >>> items = aggregator.merge(met_items, aic_items)
    >>> aggregator.last_stats.duplicates_removed
    0
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from feeling_art.domain.entities.artwork import ArtworkItem

logger = logging.getLogger(__name__)


@dataclass
class AggregationStats:
    """Statistics from one merge."""

    total_input: int = 0
    unique_items: int = 0
    duplicates_removed: int = 0
    by_source: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_input": self.total_input,
            "unique_items": self.unique_items,
            "duplicates_removed": self.duplicates_removed,
            "by_source": self.by_source,
        }


class ResultAggregator:
    """
    Merge ordered provider lists into one deduplicated list.

    Deduplication is by ``ArtworkItem.id`` only; ids are namespaced per
    provider so the same artwork never appears under two providers' ids.
    """

    def __init__(self) -> None:
        self.last_stats = AggregationStats()

    def merge(self, *lists: list[ArtworkItem]) -> list[ArtworkItem]:
        """
        Concatenate lists in argument order, dropping later duplicates by id.

        Args:
            *lists: Provider result lists, highest priority first

        Returns:
            Merged list with every id at its first position
        """
        stats = AggregationStats()
        merged: list[ArtworkItem] = []
        seen: set[str] = set()
        for items in lists:
            stats.total_input += len(items)
            self.extend_unique(merged, seen, items)

        for item in merged:
            source = str(getattr(item.source, "value", item.source) or "unknown")
            stats.by_source[source] = stats.by_source.get(source, 0) + 1
        stats.unique_items = len(merged)
        stats.duplicates_removed = stats.total_input - stats.unique_items
        self.last_stats = stats
        return merged

    @staticmethod
    def extend_unique(
        items: list[ArtworkItem],
        seen: set[str],
        incoming: Iterable[ArtworkItem],
        cap: int | None = None,
    ) -> int:
        """
        Append unseen items from *incoming* to *items* in place.

        Args:
            items: Accumulator to extend
            seen: Ids already in *items*; updated in place
            incoming: Candidate items, in priority order
            cap: Stop once *items* reaches this size

        Returns:
            Number of items appended
        """
        added = 0
        for item in incoming:
            if cap is not None and len(items) >= cap:
                break
            if item.id in seen:
                continue
            seen.add(item.id)
            items.append(item)
            added += 1
        return added
