"""
Likes Tools - toggle and list liked artworks.

Tools:
- toggle_like: Like/unlike an artwork from the latest gallery
- list_liked_artworks: Show liked artworks
"""

import logging

from mcp.server.fastmcp import FastMCP

from feeling_art.application.likes import LikesStore
from feeling_art.application.search import ResultBoard

from .formatting import format_liked

logger = logging.getLogger(__name__)


def register_likes_tools(mcp: FastMCP, result_board: ResultBoard, likes_store: LikesStore) -> None:
    """Register liked-artwork MCP tools."""

    @mcp.tool()
    def toggle_like(artwork_id: str) -> str:
        """
        Like or unlike an artwork.

        Args:
            artwork_id: Id shown in the gallery (e.g. "436535" or "aic-27992")

        Returns:
            Whether the artwork is now liked
        """
        artwork_id = (artwork_id or "").strip()
        liked = likes_store.get(artwork_id)
        if liked is not None:
            likes_store.remove(artwork_id)
            logger.info(f"Unliked {artwork_id}")
            return f"♡ Removed {liked.title or 'Untitled'} ({artwork_id}) from liked artworks."

        item = result_board.find(artwork_id)
        if item is None:
            return f"❌ Artwork {artwork_id!r} is not in the latest gallery. Search first, then like by id."

        likes_store.toggle(item)
        logger.info(f"Liked {artwork_id}")
        return f"♥ Liked {item.title or 'Untitled'} ({artwork_id})."

    @mcp.tool()
    def list_liked_artworks() -> str:
        """
        Show all liked artworks, in the order they were liked.

        Returns:
            Markdown gallery of liked artworks
        """
        return format_liked(likes_store.list())
