"""
SearchOrchestrator - End-to-end mood search across providers.

State machine for one user search:

    PRIMARY ──(no items, "painting" in terms)──► FALLBACK
       │                                            │
       └──────────────┬─────────────────────────────┘
                      ▼
               (items < min_results)
                      │
                      ▼
                    WIDEN  (one term at a time, sequential)
                      │
                      ▼
                    DONE   (truncate to max_results)

Within an attempt every provider is called concurrently; a provider that
raises contributes zero items and never aborts its siblings.

Searches are not cancellable. Each search takes a generation token and
consumers use ``is_current()`` (or ResultBoard) to drop stale outcomes.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Sequence

from feeling_art.domain.entities.artwork import (
    ArtworkItem,
    SearchAttempt,
    SearchOutcome,
    SearchPhase,
)
from feeling_art.infrastructure.sources import ArtworkProvider
from feeling_art.shared.exceptions import ProviderError

from .result_aggregator import ResultAggregator
from .term_deriver import TermDeriver
from .vocabulary import BIAS_TERM

logger = logging.getLogger(__name__)

DEFAULT_MIN_RESULTS = 50
DEFAULT_MAX_RESULTS = 500
SEARCH_FAILED_MESSAGE = "Sorry, something went wrong fetching art. Try again in a moment."


class SearchOrchestrator:
    """
    Drive PRIMARY → FALLBACK → WIDEN → DONE for a mood text.

    Usage:
        orchestrator = SearchOrchestrator([met_client, aic_client])
        outcome = await orchestrator.search("I feel calm and peaceful")
        if orchestrator.is_current(outcome):
            render(outcome.items)

    Providers are queried in list order and merged with that priority.
    """

    def __init__(
        self,
        providers: Sequence[ArtworkProvider],
        term_deriver: TermDeriver | None = None,
        aggregator: ResultAggregator | None = None,
        min_results: int = DEFAULT_MIN_RESULTS,
        max_results: int = DEFAULT_MAX_RESULTS,
        provider_limit: int | None = None,
    ):
        self._providers = list(providers)
        self._term_deriver = term_deriver or TermDeriver()
        self._aggregator = aggregator or ResultAggregator()
        self._min_results = min_results
        self._max_results = max_results
        self._provider_limit = provider_limit or max_results
        self._generations = itertools.count(1)
        self._current_generation = 0

    @property
    def current_generation(self) -> int:
        return self._current_generation

    def is_current(self, outcome: SearchOutcome) -> bool:
        """True if *outcome* belongs to the most recently started search."""
        return outcome.generation == self._current_generation

    async def search(self, text: str) -> SearchOutcome:
        """
        Run a full search for a mood description.

        Args:
            text: Free-text mood description

        Returns:
            SearchOutcome with at most max_results items; ``error`` is set only
            when nothing was found and at least one provider call raised
        """
        generation = next(self._generations)
        self._current_generation = generation
        outcome = SearchOutcome(generation=generation)

        # PRIMARY
        terms = self._term_deriver.initial_terms(text)
        query = " ".join(terms)
        outcome.display_query = query
        items = self._aggregator.merge(*await self._run_attempt(outcome, query, terms, SearchPhase.PRIMARY))
        outcome.merge_stats = self._aggregator.last_stats.to_dict()
        logger.info(f"[gen {generation}] primary '{query}' → {len(items)} items")

        # FALLBACK
        if not items and BIAS_TERM in terms:
            terms = [t for t in terms if t.lower() != BIAS_TERM]
            fallback_query = " ".join(terms)
            if fallback_query:
                items = self._aggregator.merge(
                    *await self._run_attempt(outcome, fallback_query, terms, SearchPhase.FALLBACK)
                )
                outcome.merge_stats = self._aggregator.last_stats.to_dict()
                outcome.display_query = f"{query} (fallback → {fallback_query})"
                logger.info(f"[gen {generation}] fallback '{fallback_query}' → {len(items)} items")

        # WIDEN
        if len(items) < self._min_results:
            items = await self._widen(outcome, items, terms)

        # DONE
        outcome.items = items[: self._max_results]
        outcome.terms = list(terms)
        if not outcome.items and outcome.provider_failures:
            outcome.error = SEARCH_FAILED_MESSAGE
        logger.info(
            f"[gen {generation}] done: {len(outcome.items)} items, "
            f"{len(outcome.attempts)} attempts, {outcome.provider_failures} provider failures"
        )
        return outcome

    async def _widen(
        self,
        outcome: SearchOutcome,
        items: list[ArtworkItem],
        terms: list[str],
    ) -> list[ArtworkItem]:
        """Query each term on its own until enough items are collected."""
        items = list(items)
        seen = {item.id for item in items}
        for term in terms:
            results = await self._run_attempt(outcome, term, [term], SearchPhase.WIDEN)
            for provider_items in results:
                ResultAggregator.extend_unique(items, seen, provider_items, cap=self._max_results)
            logger.info(f"[gen {outcome.generation}] widen '{term}' → {len(items)} items")
            if len(items) >= self._min_results or len(items) >= self._max_results:
                break
        return items

    async def _run_attempt(
        self,
        outcome: SearchOutcome,
        query: str,
        terms: list[str],
        phase: SearchPhase,
    ) -> list[list[ArtworkItem]]:
        """Query all providers concurrently; failed providers yield []."""
        outcome.attempts.append(SearchAttempt(query=query, terms_used=tuple(terms), phase=phase))
        results = await asyncio.gather(*(self._call_provider(p, query) for p in self._providers))

        lists: list[list[ArtworkItem]] = []
        for provider_items in results:
            if provider_items is None:
                outcome.provider_failures += 1
                lists.append([])
            else:
                lists.append(provider_items)
        return lists

    async def _call_provider(self, provider: ArtworkProvider, query: str) -> list[ArtworkItem] | None:
        try:
            return await provider.search(query, self._provider_limit)
        except ProviderError as e:
            logger.warning(f"Provider '{provider.name}' failed for '{query}': {e}")
            return None


class ResultBoard:
    """
    Holds the latest outcome a consumer should display.

    Outcomes from superseded searches are discarded, so a slow old search
    finishing after a newer one never overwrites the newer results.
    """

    def __init__(self, orchestrator: SearchOrchestrator):
        self._orchestrator = orchestrator
        self._latest: SearchOutcome | None = None

    @property
    def latest(self) -> SearchOutcome | None:
        return self._latest

    def publish(self, outcome: SearchOutcome) -> bool:
        """Accept *outcome* if it is current; return whether it was accepted."""
        if not self._orchestrator.is_current(outcome):
            logger.info(
                f"Discarding stale outcome (gen {outcome.generation}, "
                f"current {self._orchestrator.current_generation})"
            )
            return False
        self._latest = outcome
        return True

    def find(self, artwork_id: str) -> ArtworkItem | None:
        """Look up an item of the latest outcome by id."""
        if self._latest is None:
            return None
        return next((item for item in self._latest.items if item.id == artwork_id), None)
