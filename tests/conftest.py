"""Shared fixtures for crawler tests."""

import asyncio

import pytest

from scopecrawl.core import Response
from scopecrawl.errors import FetchError


class FakeFetcher:
    """In-memory fetcher serving canned HTML pages."""

    def __init__(self, pages: dict[str, str], failing: set[str] | None = None):
        self.pages = pages
        self.failing = failing or set()
        self.calls: list[str] = []
        self.closed = False

    async def fetch(self, url: str) -> Response:
        self.calls.append(url)
        # Yield to the loop so sibling tasks interleave
        await asyncio.sleep(0)
        if url in self.failing or url not in self.pages:
            raise FetchError(url, ConnectionError("connection refused"))
        return Response(url=url, status=200, content=self.pages[url].encode())

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_fetcher():
    """Factory for FakeFetcher instances."""
    return FakeFetcher
