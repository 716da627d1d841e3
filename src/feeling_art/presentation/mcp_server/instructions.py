"""
MCP Server Instructions - usage guide for AI agents.
"""

from __future__ import annotations

SERVER_INSTRUCTIONS = """
Feeling Art MCP Server - find artworks that match a mood

═══════════════════════════════════════════════════════════════════════════════
🎨 Workflow
═══════════════════════════════════════════════════════════════════════════════

1. Pass the user's own words to search_art_by_feeling(text=...).
   Do not rewrite them into keywords: the server derives search terms
   from mood words, colors, scenes and weather it finds in the text.
2. Show the returned gallery. Each artwork has an id (e.g. "436535" from
   The Met, "aic-27992" from the Art Institute of Chicago).
3. When the user likes or unlikes an artwork, call toggle_like(artwork_id=...).
4. list_liked_artworks() shows everything the user has liked so far.

Use suggest_search_terms(text=...) to preview the derived terms without
searching.

═══════════════════════════════════════════════════════════════════════════════
ℹ️ Behaviour
═══════════════════════════════════════════════════════════════════════════════

- Results from The Met come first, paintings ahead of other objects.
- If the query finds nothing, it is retried without the word "painting".
- If fewer than 50 artworks are found, each term is searched on its own
  to widen the gallery. At most 500 artworks are returned.
- Emphatic text ("SO devastated!!") selects stronger imagery.
"""
