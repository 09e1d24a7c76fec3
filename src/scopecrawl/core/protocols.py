"""The page fetcher contract the crawl coordinator depends on."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Response:
    """Body of a fetched page.

    `status` is informational only; a page is indexed whatever its status.
    """

    url: str
    status: int
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Fetcher(Protocol):
    """Retrieves pages for the coordinator.

    fetch() either returns a Response or raises FetchError; any other
    exception is treated as a bug in the fetcher and marks the task failed.
    close() releases whatever connections the fetcher holds and must be
    safe to call more than once.
    """

    async def fetch(self, url: str) -> Response:
        ...

    async def close(self) -> None:
        ...
