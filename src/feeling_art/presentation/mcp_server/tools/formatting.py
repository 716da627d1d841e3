"""
Markdown formatting for gallery output.
"""

from __future__ import annotations

from feeling_art.domain.entities.artwork import ArtworkItem, SearchOutcome

EMPTY_GALLERY_HINT = 'No matches. Try different words like "landscape", "sunlight", or "nocturne".'
SOURCES_LINE = "Searching The Met and Art Institute of Chicago for"


def format_artwork(item: ArtworkItem, index: int, liked: bool = False) -> str:
    """One gallery entry."""
    heart = "♥" if liked else "♡"
    lines = [f"{index}. {heart} **{item.title or 'Untitled'}** ({item.id})"]
    byline = item.artist
    if item.date:
        byline += f", {item.date}"
    lines.append(f"   {byline}")
    if item.medium:
        lines.append(f"   Medium: {item.medium}")
    lines.append(f"   ![{item.title}]({item.image_url})")
    lines.append(f"   [View at museum]({item.detail_url})")
    return "\n".join(lines)


def format_gallery(
    outcome: SearchOutcome,
    liked_ids: set[str] | None = None,
    limit: int | None = None,
) -> str:
    """
    Render a search outcome as Markdown.

    Args:
        outcome: Orchestrated search result
        liked_ids: Ids to mark as liked
        limit: Show only the first N items (the count line shows the total)
    """
    liked_ids = liked_ids or set()
    parts = ["## 🎨 Art for your mood"]
    if outcome.terms:
        parts.append(f"**Suggested terms**: {', '.join(outcome.terms)}")
    if outcome.display_query:
        parts.append(f"{SOURCES_LINE}: **{outcome.display_query}**")
    if outcome.error:
        parts.append(f"❌ {outcome.error}")
        return "\n\n".join(parts)
    if not outcome.items:
        parts.append(EMPTY_GALLERY_HINT)
        return "\n\n".join(parts)

    shown = outcome.items[:limit] if limit else outcome.items
    parts.append(f"**Found**: {len(outcome.items)} artworks (showing {len(shown)})")
    parts.extend(format_artwork(item, i, item.id in liked_ids) for i, item in enumerate(shown, 1))
    return "\n\n".join(parts)


def format_liked(items: list[ArtworkItem]) -> str:
    """Render the liked-artworks gallery."""
    if not items:
        return "No liked artworks yet."
    parts = [f"## ♥ Liked Art ({len(items)})"]
    parts.extend(format_artwork(item, i, liked=True) for i, item in enumerate(items, 1))
    return "\n\n".join(parts)
