#!/usr/bin/env python3
"""
Feeling Art MCP Server - HTTP Mode

This script runs the Feeling Art MCP server in HTTP mode (SSE or streamable-http),
allowing remote clients from other machines to connect.

Usage:
    # Run with SSE transport (default, more compatible)
    python run_server.py --transport sse --port 8765

    # Run with streamable-http transport
    python run_server.py --transport streamable-http --port 8765

    # Keep liked artworks somewhere else
    python run_server.py --data-dir /var/lib/feeling-art

Environment Variables:
    FEELING_ART_DATA_DIR: Directory for liked artworks
    FEELING_ART_TIMEOUT, FEELING_ART_MIN_RESULTS, FEELING_ART_MAX_RESULTS,
    FEELING_ART_PROVIDER_LIMIT: Search settings (see feeling-art-mcp)
    MCP_PORT: Server port (default: 8765)
    MCP_HOST: Server host (default: 0.0.0.0)
"""

import argparse
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from feeling_art import __version__
from feeling_art.presentation.mcp_server.server import (
    close_providers,
    config_from_env,
    create_server,
    get_container,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_app(transport: str, port: int, data_dir: str | None = None) -> Starlette:
    """Wrap the MCP app with health, info and read-only gallery endpoints.

    Server settings come from the FEELING_ART_* environment variables;
    *data_dir* overrides FEELING_ART_DATA_DIR when given.
    """
    config = config_from_env()
    if data_dir:
        config["data_dir"] = data_dir
    server = create_server(**config)
    container = get_container()

    if transport == "sse":
        mcp_app = server.sse_app()
    else:
        mcp_app = server.streamable_http_app()

    async def health(request):
        return JSONResponse({"status": "ok", "service": "feeling-art-mcp"})

    async def info(request):
        return JSONResponse({
            "service": "Feeling Art MCP Server",
            "version": __version__,
            "transport": transport,
            "endpoints": {
                "mcp": {"sse": "/sse", "messages": "/messages"} if transport == "sse" else {"mcp": "/mcp"},
                "api": {
                    "latest_gallery": "/api/gallery/latest",
                    "likes": "/api/likes",
                },
                "utility": {"health": "/health"},
            },
            "usage": {
                "vscode_mcp_json": {
                    "type": transport,
                    "url": f"http://YOUR_SERVER_IP:{port}/{'sse' if transport == 'sse' else 'mcp'}",
                }
            },
        })

    async def latest_gallery(request):
        outcome = container.result_board().latest
        if outcome is None:
            return JSONResponse({"detail": "No search yet"}, status_code=404)
        return JSONResponse(outcome.to_dict())

    async def likes(request):
        return JSONResponse({"items": [item.to_dict() for item in container.likes_store().list()]})

    @asynccontextmanager
    async def lifespan(app):
        async with mcp_app.router.lifespan_context(app):
            yield
        await close_providers(container)

    return Starlette(
        routes=[
            Route("/health", health),
            Route("/info", info),
            Route("/api/gallery/latest", latest_gallery),
            Route("/api/likes", likes),
            Mount("/", app=mcp_app),
        ],
        lifespan=lifespan,
    )


def main():
    parser = argparse.ArgumentParser(
        description="Run Feeling Art MCP Server in HTTP mode"
    )
    parser.add_argument(
        "--transport",
        choices=["sse", "streamable-http"],
        default="sse",
        help="Transport protocol (default: sse)"
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", "0.0.0.0"),
        help="Server host (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", "8765")),
        help="Server port (default: 8765)"
    )
    parser.add_argument(
        "--data-dir",
        default=os.environ.get("FEELING_ART_DATA_DIR"),
        help="Directory for liked artworks (default: ~/.feeling-art-mcp)"
    )

    args = parser.parse_args()

    logger.info("Creating Feeling Art MCP Server...")
    logger.info(f"  Transport: {args.transport}")
    logger.info(f"  Host: {args.host}")
    logger.info(f"  Port: {args.port}")

    app = build_app(args.transport, args.port, data_dir=args.data_dir)

    logger.info(f"Starting server at http://{args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
