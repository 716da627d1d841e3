"""
Domain Entity: ArtworkItem

Provider-agnostic artwork record shared by every layer.
Pure domain entity: source mapping is handled by the Infrastructure
layer clients (MetMuseumClient, ArtInstituteClient).
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Media that count as "painted" for the painting-first ordering
PAINTING_MEDIUM_PATTERN = re.compile(r"(oil|tempera|watercolor|gouache|acrylic)", re.IGNORECASE)


class ArtworkSource(str, Enum):
    """Provider identifier."""

    MET = "met"
    AIC = "aic"


class SearchPhase(str, Enum):
    """Orchestration phase that issued a query."""

    PRIMARY = "primary"
    FALLBACK = "fallback"
    WIDEN = "widen"


@dataclass(frozen=True)
class ArtworkItem:
    """
    Normalized artwork.

    Invariants:
    - image_url is never empty (records without one are never mapped)
    - id is unique across providers (AIC ids carry an ``aic-`` prefix)
    """

    id: str
    title: str
    image_url: str
    detail_url: str
    artist: str = "Unknown"
    date: str = ""
    medium: str = ""
    classification: str = ""
    source: ArtworkSource | str = ""

    @property
    def is_painting(self) -> bool:
        """Whether classification or medium marks this as a painted work."""
        if "painting" in self.classification.lower():
            return True
        return bool(PAINTING_MEDIUM_PATTERN.search(self.medium))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        data = dataclasses.asdict(self)
        if isinstance(self.source, ArtworkSource):
            data["source"] = self.source.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ArtworkItem:
        """Rebuild an item serialized with :meth:`to_dict`."""
        known = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass(frozen=True)
class SearchAttempt:
    """One query issued to both providers."""

    query: str
    terms_used: tuple[str, ...]
    phase: SearchPhase = SearchPhase.PRIMARY


@dataclass
class SearchOutcome:
    """
    Result of one orchestrated search, handed to the rendering surface.

    Attributes:
        items: Deduplicated, capped artwork list
        display_query: Query shown to the user, with a fallback note if any
        terms: Final term list (after fallback adjustment)
        attempts: Every query issued, in order
        generation: Token of the search that produced this outcome
        error: Generic user-facing message, or None
        provider_failures: Number of provider calls that raised
        merge_stats: Counts of the primary (or fallback) merge, by source
    """

    items: list[ArtworkItem] = field(default_factory=list)
    display_query: str = ""
    terms: list[str] = field(default_factory=list)
    attempts: list[SearchAttempt] = field(default_factory=list)
    generation: int = 0
    error: str | None = None
    provider_failures: int = 0
    merge_stats: dict[str, Any] = field(default_factory=dict)

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "display_query": self.display_query,
            "terms": self.terms,
            "generation": self.generation,
            "error": self.error,
            "provider_failures": self.provider_failures,
            "merge_stats": self.merge_stats,
            "attempts": [
                {"query": a.query, "terms_used": list(a.terms_used), "phase": a.phase.value}
                for a in self.attempts
            ],
            "items": [item.to_dict() for item in self.items],
        }
