"""Application layer: mood search and liked artworks."""
