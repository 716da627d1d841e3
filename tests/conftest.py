"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import asyncio
import tempfile
from pathlib import Path

import httpx
import pytest

from feeling_art.domain.entities.artwork import ArtworkItem, ArtworkSource
from feeling_art.shared.exceptions import TransportError

# ============================================================
# Environment Fixtures
# ============================================================


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ============================================================
# Artwork Fixtures
# ============================================================


def make_item(
    item_id: str,
    title: str | None = None,
    medium: str = "",
    classification: str = "",
    source: ArtworkSource | str = ArtworkSource.MET,
) -> ArtworkItem:
    """Build an ArtworkItem with predictable URLs."""
    return ArtworkItem(
        id=item_id,
        title=title if title is not None else f"Artwork {item_id}",
        image_url=f"https://images.example.org/{item_id}.jpg",
        detail_url=f"https://museum.example.org/{item_id}",
        medium=medium,
        classification=classification,
        source=source,
    )


def make_items(prefix: str, count: int, start: int = 0) -> list[ArtworkItem]:
    """Build *count* items with ids ``{prefix}{n}``."""
    return [make_item(f"{prefix}{n}") for n in range(start, start + count)]


@pytest.fixture
def sample_item():
    return make_item("436535", title="Wheat Field with Cypresses", medium="Oil on canvas", classification="Paintings")


# ============================================================
# Fake Providers
# ============================================================


class FakeProvider:
    """
    Scripted ArtworkProvider.

    ``responses`` maps a query string to a list of items or an exception
    instance to raise. Unknown queries return ``default``. An optional
    ``gates`` mapping holds an asyncio.Event per query that the call waits
    on before answering.
    """

    def __init__(
        self,
        name: str,
        responses: dict[str, list[ArtworkItem] | Exception] | None = None,
        default: list[ArtworkItem] | Exception | None = None,
        gates: dict[str, asyncio.Event] | None = None,
    ):
        self._name = name
        self.responses = responses or {}
        self.default = default if default is not None else []
        self.gates = gates or {}
        self.calls: list[tuple[str, int]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def queries(self) -> list[str]:
        return [query for query, _ in self.calls]

    async def search(self, query: str, limit: int) -> list[ArtworkItem]:
        self.calls.append((query, limit))
        gate = self.gates.get(query)
        if gate is not None:
            await gate.wait()
        result = self.responses.get(query, self.default)
        if isinstance(result, Exception):
            raise result
        return list(result)


@pytest.fixture
def fake_provider_factory():
    return FakeProvider


@pytest.fixture
def failing_transport():
    """A TransportError as raised by a provider whose search call failed."""
    return TransportError("HTTP 503: Service Unavailable", provider="Met", status_code=503)


# ============================================================
# Mock HTTP Transport
# ============================================================


def mock_http_client(handler) -> httpx.AsyncClient:
    """httpx.AsyncClient routed through *handler* instead of the network."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
