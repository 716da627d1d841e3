"""
Application DI Container (dependency-injector).

Centralizes service creation and lifecycle management.

Usage::

    from feeling_art.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict({
        "data_dir": "~/.feeling-art-mcp",
        "timeout": 30.0,
        "user_agent": "feeling-art-mcp/0.1",
        "min_results": 50,
        "max_results": 500,
        "provider_limit": 500,
    })

    orchestrator = container.orchestrator()
    likes = container.likes_store()

    # In tests, override any provider:
    container.met_client.override(providers.Object(mock_met))
"""

from __future__ import annotations

import logging

from dependency_injector import containers, providers

logger = logging.getLogger(__name__)


def _create_met_client(timeout: float, user_agent: str | None) -> object:
    """Lazy factory for MetMuseumClient (avoids top-level httpx client creation)."""
    from feeling_art.infrastructure.sources import MetMuseumClient

    headers = {"User-Agent": user_agent} if user_agent else None
    return MetMuseumClient(timeout=timeout or 30.0, headers=headers)


def _create_aic_client(timeout: float, user_agent: str | None) -> object:
    """Lazy factory for ArtInstituteClient."""
    from feeling_art.infrastructure.sources import ArtInstituteClient

    headers = {"User-Agent": user_agent} if user_agent else None
    return ArtInstituteClient(timeout=timeout or 30.0, headers=headers)


def _create_orchestrator(
    met_client: object,
    aic_client: object,
    min_results: int | None,
    max_results: int | None,
    provider_limit: int | None,
) -> object:
    """Lazy factory for SearchOrchestrator; Met results take priority over AIC."""
    from feeling_art.application.search import SearchOrchestrator
    from feeling_art.application.search.orchestrator import DEFAULT_MAX_RESULTS, DEFAULT_MIN_RESULTS

    return SearchOrchestrator(
        [met_client, aic_client],
        min_results=min_results or DEFAULT_MIN_RESULTS,
        max_results=max_results or DEFAULT_MAX_RESULTS,
        provider_limit=provider_limit,
    )


def _create_result_board(orchestrator: object) -> object:
    from feeling_art.application.search import ResultBoard

    return ResultBoard(orchestrator)


def _create_likes_store(data_dir: str | None) -> object:
    """Lazy factory for the likes store (memory-only without a data_dir)."""
    from feeling_art.application.likes import InMemoryLikesStore, JsonLikesStore

    if not data_dir:
        logger.info("No data directory configured, likes are kept in memory")
        return InMemoryLikesStore()
    return JsonLikesStore(data_dir)


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for the Feeling Art application.

    Manages creation and lifecycle of all core services:
    - ``met_client`` / ``aic_client``: provider clients
    - ``orchestrator``: mood search state machine
    - ``result_board``: latest non-stale search outcome
    - ``likes_store``: persisted liked artworks
    """

    config = providers.Configuration()

    met_client = providers.Singleton(
        _create_met_client,
        timeout=config.timeout,
        user_agent=config.user_agent,
    )

    aic_client = providers.Singleton(
        _create_aic_client,
        timeout=config.timeout,
        user_agent=config.user_agent,
    )

    orchestrator = providers.Singleton(
        _create_orchestrator,
        met_client=met_client,
        aic_client=aic_client,
        min_results=config.min_results,
        max_results=config.max_results,
        provider_limit=config.provider_limit,
    )

    result_board = providers.Singleton(
        _create_result_board,
        orchestrator=orchestrator,
    )

    likes_store = providers.Singleton(
        _create_likes_store,
        data_dir=config.data_dir,
    )


__all__ = ["ApplicationContainer"]
