"""Feeling Art MCP server."""

from __future__ import annotations

from .server import close_providers, config_from_env, create_server, get_container, main
from .tools import register_all_tools

__all__ = ["close_providers", "config_from_env", "create_server", "get_container", "main", "register_all_tools"]
