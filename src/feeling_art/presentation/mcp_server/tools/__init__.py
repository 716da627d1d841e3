"""
Feeling Art MCP Tools

✅ Mood search (2):
- suggest_search_terms, search_art_by_feeling

✅ Likes (2):
- toggle_like, list_liked_artworks

Usage:
    from .tools import register_all_tools
    register_all_tools(mcp, orchestrator, result_board, likes_store)
"""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from feeling_art.application.likes import LikesStore
from feeling_art.application.search import ResultBoard, SearchOrchestrator

from .likes import register_likes_tools
from .mood_search import register_mood_search_tools

logger = logging.getLogger(__name__)

TOOL_NAMES = [
    "suggest_search_terms",
    "search_art_by_feeling",
    "toggle_like",
    "list_liked_artworks",
]


def register_all_tools(
    mcp: FastMCP,
    orchestrator: SearchOrchestrator,
    result_board: ResultBoard,
    likes_store: LikesStore,
) -> dict[str, int]:
    """Register all MCP tools; return tool counts per category."""
    register_mood_search_tools(mcp, orchestrator, result_board, likes_store)
    register_likes_tools(mcp, result_board, likes_store)
    stats = {"mood_search": 2, "likes": 2}
    logger.info(f"Registered {sum(stats.values())} tools: {', '.join(TOOL_NAMES)}")
    return stats


__all__ = ["TOOL_NAMES", "register_all_tools"]
