"""
Feeling Art MCP Server

A Model Context Protocol server that turns a mood description into a
gallery of artworks from The Met and the Art Institute of Chicago.

Architecture:
- instructions.py: SERVER_INSTRUCTIONS for AI agents
- tools/: Tool implementations (mood search, likes)
- container: DI container (dependency-injector) for service lifecycle

Environment Variables:
    FEELING_ART_DATA_DIR: Directory for liked artworks (default: ~/.feeling-art-mcp)
    FEELING_ART_TIMEOUT: Provider request timeout in seconds (default: 30)
    FEELING_ART_MIN_RESULTS: Widen until this many artworks (default: 50)
    FEELING_ART_MAX_RESULTS: Hard cap on artworks per search (default: 500)
    FEELING_ART_PROVIDER_LIMIT: Per-provider result limit (default: 500)
"""

from __future__ import annotations

import logging
import os
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP

from feeling_art.container import ApplicationContainer
from feeling_art.shared.exceptions import ConfigurationError

from .instructions import SERVER_INSTRUCTIONS
from .tools import register_all_tools

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = str(Path.home() / ".feeling-art-mcp")
DEFAULT_USER_AGENT = "feeling-art-mcp/0.1"

# ── Module-level DI container ──────────────────────────────────────────────
_container: ApplicationContainer | None = None


def get_container() -> ApplicationContainer:
    """Get the application DI container.

    Raises:
        RuntimeError: If ``create_server()`` has not been called yet.
    """
    if _container is None:
        msg = "Container not initialized. Call create_server() first."
        raise RuntimeError(msg)
    return _container


def _make_lifespan(
    container: ApplicationContainer,
) -> Callable[[FastMCP], AbstractAsyncContextManager[ApplicationContainer]]:
    """
    Create a FastMCP lifespan handler bound to *container*.

    The lifespan is entered once per client session (every SSE connection
    runs its own), so it must not close process-wide singletons. Provider
    clients are closed by :func:`close_providers` at process shutdown.
    """

    @asynccontextmanager
    async def _lifespan(server: FastMCP) -> AsyncIterator[ApplicationContainer]:
        """Session lifecycle: startup → yield → shutdown."""
        logger.info("Lifecycle: session started")
        try:
            yield container
        finally:
            logger.info("Lifecycle: session ended")

    return _lifespan


async def close_providers(container: ApplicationContainer) -> None:
    """Close the provider HTTP clients (process shutdown)."""
    await container.met_client().close()
    await container.aic_client().close()
    logger.info("Lifecycle: shutdown, provider HTTP clients closed")


def create_server(
    name: str = "feeling-art",
    data_dir: str | None = None,
    timeout: float = 30.0,
    user_agent: str = DEFAULT_USER_AGENT,
    min_results: int | None = None,
    max_results: int | None = None,
    provider_limit: int | None = None,
) -> FastMCP:
    """
    Create and configure the Feeling Art MCP server.

    Args:
        name: Server name.
        data_dir: Directory for liked artworks. Default: ~/.feeling-art-mcp
        timeout: Provider request timeout in seconds.
        user_agent: User-Agent sent to the museum APIs.
        min_results: Widen the search until this many artworks are found.
        max_results: Hard cap on artworks per search.
        provider_limit: Maximum artworks requested from each provider per call.

    Returns:
        Configured FastMCP server instance.
    """
    global _container
    logger.info("Initializing Feeling Art MCP Server...")

    # ── DI container ────────────────────────────────────────────────────
    _container = ApplicationContainer()
    _container.config.from_dict(
        {
            "data_dir": data_dir or DEFAULT_DATA_DIR,
            "timeout": timeout,
            "user_agent": user_agent,
            "min_results": min_results,
            "max_results": max_results,
            "provider_limit": provider_limit,
        }
    )

    orchestrator = _container.orchestrator()
    result_board = _container.result_board()
    likes_store = _container.likes_store()
    logger.info("Likes data directory: %s", data_dir or DEFAULT_DATA_DIR)

    # ── Create MCP server with lifespan ─────────────────────────────────
    mcp = FastMCP(
        name,
        instructions=SERVER_INSTRUCTIONS,
        lifespan=_make_lifespan(_container),
    )

    stats = register_all_tools(
        mcp=mcp,
        orchestrator=orchestrator,
        result_board=result_board,
        likes_store=likes_store,
    )
    logger.info("Tool registration complete: %s", stats)
    logger.info("Feeling Art MCP Server initialized successfully")

    return mcp


def _env_number(name: str, cast: Callable[[str], Any]) -> Any:
    """Read an optional numeric environment variable."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def config_from_env() -> dict[str, Any]:
    """
    Build ``create_server()`` keyword arguments from FEELING_ART_* variables.

    Raises:
        ConfigurationError: A numeric variable is not a number
    """
    return {
        "data_dir": os.environ.get("FEELING_ART_DATA_DIR", "").strip() or None,
        "timeout": _env_number("FEELING_ART_TIMEOUT", float) or 30.0,
        "min_results": _env_number("FEELING_ART_MIN_RESULTS", int),
        "max_results": _env_number("FEELING_ART_MAX_RESULTS", int),
        "provider_limit": _env_number("FEELING_ART_PROVIDER_LIMIT", int),
    }


def main():
    """Run the MCP server."""

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    server = create_server(**config_from_env())

    # Run stdio MCP server (blocks)
    server.run()


if __name__ == "__main__":
    main()
