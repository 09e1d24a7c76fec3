"""Shared visited set with atomic claim semantics."""

from enum import Enum


class CrawlStatus(str, Enum):
    """Outcome of a claimed URI."""
    PENDING = "pending"
    INDEXED = "indexed"
    PARTIAL = "partial"
    FETCH_ERROR = "fetch_error"
    DROPPED = "dropped"
    FAILED = "failed"


SUCCESS_STATUSES = frozenset({CrawlStatus.INDEXED, CrawlStatus.PARTIAL})


class VisitedSet:
    """
    Record of every URI fetched or claimed during one crawl run.

    Task code only ever calls claim(), which tests and inserts in one step.
    It contains no await, so within an event loop no other task can observe
    the URI between the test and the insert.
    """

    def __init__(self):
        self._status: dict[str, CrawlStatus] = {}

    def claim(self, uri: str) -> bool:
        """Claim a URI for crawling. Returns False if it was already claimed."""
        if uri in self._status:
            return False
        self._status[uri] = CrawlStatus.PENDING
        return True

    def mark(self, uri: str, status: CrawlStatus):
        """Record the outcome for a claimed URI."""
        if uri not in self._status:
            raise KeyError(f"{uri} was never claimed")
        self._status[uri] = status

    def outcomes(self) -> dict[str, CrawlStatus]:
        """Snapshot of every claimed URI and its status."""
        return dict(self._status)

    def __len__(self) -> int:
        return len(self._status)
