"""
Mood Search Tools - derive terms and search both collections.

Tools:
- suggest_search_terms: Preview derived terms for a mood text
- search_art_by_feeling: Full orchestrated search, rendered as a gallery
"""

import json
import logging

from mcp.server.fastmcp import FastMCP

from feeling_art.application.likes import LikesStore
from feeling_art.application.search import IntensityClassifier, ResultBoard, SearchOrchestrator, TermDeriver

from .formatting import format_gallery

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_LIMIT = 24
MAX_DISPLAY_LIMIT = 500


def _normalize_limit(limit: int | str | None, default: int, max_val: int) -> int:
    try:
        value = int(limit) if limit is not None else default
    except (TypeError, ValueError):
        return default
    return max(1, min(value, max_val))


def register_mood_search_tools(
    mcp: FastMCP,
    orchestrator: SearchOrchestrator,
    result_board: ResultBoard,
    likes_store: LikesStore,
) -> None:
    """Register mood search MCP tools."""
    term_deriver = TermDeriver()
    classifier = IntensityClassifier()

    @mcp.tool()
    def suggest_search_terms(text: str) -> str:
        """
        Preview the search terms derived from a mood description.

        Args:
            text: How the user feels, in their own words

        Returns:
            JSON with the derived terms, the query string and the intensity flag
        """
        signals = classifier.signals(text or "")
        return json.dumps(
            {
                "terms": term_deriver.derive(text or ""),
                "query": term_deriver.build_query(text or ""),
                "strong": signals.strong,
                "signals": {
                    "exclamation": signals.exclamation,
                    "intensifier": signals.intensifier,
                    "crisis_word": signals.crisis_word,
                },
            },
            ensure_ascii=False,
        )

    @mcp.tool()
    async def search_art_by_feeling(text: str, limit: int | str = DEFAULT_DISPLAY_LIMIT) -> str:
        """
        🎨 Find artworks that match how the user feels.

        Searches The Met and the Art Institute of Chicago with terms derived
        from the mood text, retries without the painting bias when nothing
        is found, and widens term by term when fewer than 50 works are found.

        Args:
            text: How the user feels, in their own words
                  (e.g. "I feel calm but a little nostalgic")
            limit: Number of artworks to show (default 24, max 500)

        Returns:
            Markdown gallery with artwork ids for toggle_like
        """
        if not text or not text.strip():
            return "❌ Describe how you feel, e.g. search_art_by_feeling(\"I feel calm and peaceful\")"

        display_limit = _normalize_limit(limit, DEFAULT_DISPLAY_LIMIT, MAX_DISPLAY_LIMIT)
        outcome = await orchestrator.search(text.strip())
        if not result_board.publish(outcome):
            return "⏭️ A newer search has started; these results were discarded."

        liked_ids = {item.id for item in likes_store.list()}
        return format_gallery(outcome, liked_ids=liked_ids, limit=display_limit)
