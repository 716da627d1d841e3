"""
Tests for MCP Tools (mood search, likes) and gallery formatting.
"""

import json

import pytest
from conftest import FakeProvider, make_item, make_items
from mcp.server.fastmcp import FastMCP

from feeling_art.application.likes import InMemoryLikesStore
from feeling_art.application.search import ResultBoard, SearchOrchestrator
from feeling_art.domain.entities.artwork import SearchOutcome
from feeling_art.presentation.mcp_server.tools import TOOL_NAMES, register_all_tools
from feeling_art.presentation.mcp_server.tools.formatting import (
    EMPTY_GALLERY_HINT,
    format_artwork,
    format_gallery,
    format_liked,
)
from feeling_art.presentation.mcp_server.tools.mood_search import _normalize_limit


@pytest.fixture
def met():
    return FakeProvider("Met", default=make_items("m", 60))


@pytest.fixture
def services(met):
    orchestrator = SearchOrchestrator([met, FakeProvider("AIC")])
    return orchestrator, ResultBoard(orchestrator), InMemoryLikesStore()


@pytest.fixture
def mcp(services):
    orchestrator, board, likes = services
    server = FastMCP("test")
    register_all_tools(server, orchestrator, board, likes)
    return server


def tool(mcp, name):
    return mcp._tool_manager._tools[name].fn


# =============================================================================
# Formatting
# =============================================================================


class TestFormatting:
    def test_format_artwork(self):
        item = make_item("436535", title="Wheat Field", medium="Oil on canvas")
        text = format_artwork(item, 1, liked=True)
        assert text.startswith("1. ♥ **Wheat Field** (436535)")
        assert "Medium: Oil on canvas" in text
        assert item.image_url in text
        assert item.detail_url in text

    def test_format_artwork_untitled(self):
        assert "**Untitled**" in format_artwork(make_item("1", title=""), 1)

    def test_gallery_error(self):
        outcome = SearchOutcome(display_query="painting sea", error="Sorry, something went wrong")
        text = format_gallery(outcome)
        assert "❌ Sorry, something went wrong" in text
        assert "painting sea" in text

    def test_gallery_empty(self):
        text = format_gallery(SearchOutcome(display_query="painting", terms=[]))
        assert EMPTY_GALLERY_HINT in text

    def test_gallery_limit_and_likes(self):
        outcome = SearchOutcome(items=make_items("m", 5), display_query="q", terms=["q"])
        text = format_gallery(outcome, liked_ids={"m1"}, limit=2)
        assert "**Found**: 5 artworks (showing 2)" in text
        assert "♥ **Artwork m1**" in text
        assert "m2" not in text

    def test_format_liked(self):
        assert format_liked([]) == "No liked artworks yet."
        assert "## ♥ Liked Art (2)" in format_liked(make_items("m", 2))


class TestNormalizeLimit:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, 24), ("10", 10), ("abc", 24), (0, 1), (10_000, 500)],
    )
    def test_normalize(self, value, expected):
        assert _normalize_limit(value, 24, 500) == expected


# =============================================================================
# Registration
# =============================================================================


class TestRegistration:
    def test_all_tools_registered(self, mcp):
        assert set(mcp._tool_manager._tools) == set(TOOL_NAMES)

    def test_stats(self, services):
        orchestrator, board, likes = services
        stats = register_all_tools(FastMCP("t"), orchestrator, board, likes)
        assert stats == {"mood_search": 2, "likes": 2}


# =============================================================================
# Mood search tools
# =============================================================================


class TestSuggestSearchTerms:
    def test_terms(self, mcp):
        result = json.loads(tool(mcp, "suggest_search_terms")("I am SO devastated!!"))
        assert result["terms"] == ["painting", "lamentation", "pieta", "darkness", "requiem"]
        assert result["query"] == "painting lamentation pieta darkness requiem"
        assert result["strong"] is True
        assert result["signals"] == {"exclamation": True, "intensifier": True, "crisis_word": True}


class TestSearchArtByFeeling:
    async def test_empty_text(self, mcp):
        result = await tool(mcp, "search_art_by_feeling")("   ")
        assert result.startswith("❌")

    async def test_gallery(self, mcp, services, met):
        _, board, _ = services

        result = await tool(mcp, "search_art_by_feeling")("I feel calm and peaceful", limit=3)

        assert "painting landscape sea horizon twilight" in result
        assert "**Found**: 60 artworks (showing 3)" in result
        assert met.queries == ["painting landscape sea horizon twilight"]
        assert board.latest is not None

    async def test_liked_items_marked(self, mcp, services):
        _, _, likes = services
        likes.add(make_item("m0"))

        result = await tool(mcp, "search_art_by_feeling")("calm", limit=2)

        assert "1. ♥ **Artwork m0**" in result
        assert "2. ♡ **Artwork m1**" in result


# =============================================================================
# Likes tools
# =============================================================================


class TestLikesTools:
    async def test_like_requires_gallery_item(self, mcp):
        result = tool(mcp, "toggle_like")("m3")
        assert result.startswith("❌")

    async def test_toggle_like_and_unlike(self, mcp, services):
        _, _, likes = services
        await tool(mcp, "search_art_by_feeling")("calm")

        liked = tool(mcp, "toggle_like")("m3")
        assert liked.startswith("♥ Liked Artwork m3")
        assert likes.contains("m3")

        unliked = tool(mcp, "toggle_like")("m3")
        assert unliked.startswith("♡ Removed Artwork m3 (m3)")
        assert not likes.contains("m3")

    async def test_unlike_item_from_older_gallery(self, mcp, services):
        _, _, likes = services
        likes.add(make_item("old-1", title="Harbor at Dusk"))

        result = tool(mcp, "toggle_like")("old-1")

        assert result.startswith("♡ Removed Harbor at Dusk (old-1)")
        assert likes.list() == []

    async def test_list_liked(self, mcp, services):
        _, _, likes = services
        assert tool(mcp, "list_liked_artworks")() == "No liked artworks yet."

        likes.add(make_item("m5", title="Harbor at Dusk"))

        assert "Harbor at Dusk" in tool(mcp, "list_liked_artworks")()
