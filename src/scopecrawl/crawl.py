"""Crawler engine with async concurrency."""

import asyncio
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .config import settings
from .core import Fetcher, HttpFetcher
from .errors import FetchError
from .indexer import index_page
from .links import is_allowed, resolve_link
from .tokens import tokenize
from .visited import SUCCESS_STATUSES, CrawlStatus, VisitedSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrawlTask:
    """A URL to crawl with its remaining depth budget."""
    uri: str
    depth: int
    source_uri: str | None = None


@dataclass
class CrawlResult:
    """Indexed pages and per-URI outcomes of a crawl run."""
    index: dict[str, frozenset[str]] = field(default_factory=dict)
    outcomes: dict[str, CrawlStatus] = field(default_factory=dict)

    @property
    def visited(self) -> set[str]:
        """URIs whose page was fetched and indexed."""
        return set(self.index)

    @property
    def failures(self) -> dict[str, CrawlStatus]:
        """Claimed URIs that were not indexed."""
        return {
            uri: status
            for uri, status in self.outcomes.items()
            if status not in SUCCESS_STATUSES
        }

    def count(self, status: CrawlStatus) -> int:
        """Number of URIs that ended with the given status."""
        return sum(1 for s in self.outcomes.values() if s == status)


class CrawlCoordinator:
    """
    Runs a bounded-depth crawl restricted to a set of domain prefixes.

    Work flows through an asyncio.Queue consumed by a fixed pool of workers.
    The queue's unfinished-task counter is raised by every scheduled task and
    lowered only when a worker finishes it, so joining the queue waits for all
    transitively scheduled work.

    With queue_size > 0 the queue is bounded: seeds wait for room, discovered
    links that find it full are dropped.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        domains: Sequence[str],
        max_depth: int,
        concurrency: int = 10,
        queue_size: int = 0,
    ):
        if max_depth < 0:
            raise ValueError("max_depth must be non-negative")
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")

        self.fetcher = fetcher
        self.domains = tuple(domains)
        self.max_depth = max_depth
        self.concurrency = concurrency
        self.queue_size = max(queue_size, 0)

        self.visited = VisitedSet()
        self.index: dict[str, frozenset[str]] = {}
        self._queue: asyncio.Queue[CrawlTask] | None = None

    def _schedule(self, task: CrawlTask) -> bool:
        """Claim a task's URI and hand it to the workers. No awaits in here."""
        if not self.visited.claim(task.uri):
            return False
        try:
            self._queue.put_nowait(task)
        except asyncio.QueueFull:
            self.visited.mark(task.uri, CrawlStatus.DROPPED)
            logger.warning("Queue full, dropping %s (found on %s)", task.uri, task.source_uri)
            return False
        return True

    async def _process(self, task: CrawlTask):
        """Fetch, index and expand a single URI."""
        try:
            response = await self.fetcher.fetch(task.uri)
        except FetchError as e:
            logger.debug("%s", e)
            self.visited.mark(task.uri, CrawlStatus.FETCH_ERROR)
            return

        page = index_page(task.uri, tokenize(response.text))
        self.index[page.uri] = page.words
        self.visited.mark(
            task.uri,
            CrawlStatus.INDEXED if page.complete else CrawlStatus.PARTIAL,
        )

        if task.depth == 0:
            return

        for link in page.links:
            candidate = resolve_link(link, task.uri)
            if is_allowed(candidate, self.domains):
                self._schedule(CrawlTask(
                    uri=candidate,
                    depth=task.depth - 1,
                    source_uri=task.uri,
                ))

    async def _worker(self, worker_id: int):
        """Worker coroutine that processes tasks from the queue."""
        while True:
            task = await self._queue.get()
            try:
                await self._process(task)
            except Exception:
                logger.exception("Worker %d failed on %s", worker_id, task.uri)
                self.visited.mark(task.uri, CrawlStatus.FAILED)
            finally:
                self._queue.task_done()

    async def run(self, seeds: Iterable[str]) -> CrawlResult:
        """Crawl from the given seeds and return once all work is done."""
        # Each run starts from an empty visited set
        self.visited = VisitedSet()
        self.index = {}
        self._queue = asyncio.Queue(maxsize=self.queue_size)

        workers = [
            asyncio.create_task(self._worker(i))
            for i in range(self.concurrency)
        ]
        try:
            # Seeds skip the domain filter and wait for room in a bounded queue
            for seed in seeds:
                if self.visited.claim(seed):
                    await self._queue.put(CrawlTask(uri=seed, depth=self.max_depth))
            await self._queue.join()
        finally:
            for worker in workers:
                worker.cancel()
            await asyncio.gather(*workers, return_exceptions=True)

        return CrawlResult(index=dict(self.index), outcomes=self.visited.outcomes())


async def run_crawl(
    seeds: Sequence[str],
    domains: Sequence[str],
    max_depth: int | None = None,
    concurrency: int | None = None,
    queue_size: int | None = None,
    fetcher: Fetcher | None = None,
) -> CrawlResult:
    """Run a crawl with settings defaults and return its result."""
    owns_fetcher = fetcher is None
    if fetcher is None:
        fetcher = HttpFetcher.from_settings()

    coordinator = CrawlCoordinator(
        fetcher=fetcher,
        domains=domains,
        max_depth=settings.max_depth if max_depth is None else max_depth,
        concurrency=settings.concurrency if concurrency is None else concurrency,
        queue_size=settings.queue_size if queue_size is None else queue_size,
    )

    try:
        return await coordinator.run(seeds)
    finally:
        if owns_fetcher:
            await fetcher.close()
