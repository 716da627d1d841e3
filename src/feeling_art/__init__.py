"""
Feeling Art - find artworks that match how you feel.

Turns a free-text mood description into search terms and gathers matching
artworks from The Metropolitan Museum of Art and the Art Institute of
Chicago.

Quick start:
    from feeling_art.application.search import SearchOrchestrator
    from feeling_art.infrastructure.sources import ArtInstituteClient, MetMuseumClient

    orchestrator = SearchOrchestrator([MetMuseumClient(), ArtInstituteClient()])
    outcome = await orchestrator.search("I feel calm and peaceful")
"""

__version__ = "0.1.0"
