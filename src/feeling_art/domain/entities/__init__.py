"""Domain entities."""

from __future__ import annotations

from .artwork import (
    PAINTING_MEDIUM_PATTERN,
    ArtworkItem,
    ArtworkSource,
    SearchAttempt,
    SearchOutcome,
    SearchPhase,
)

__all__ = [
    "PAINTING_MEDIUM_PATTERN",
    "ArtworkItem",
    "ArtworkSource",
    "SearchAttempt",
    "SearchOutcome",
    "SearchPhase",
]
