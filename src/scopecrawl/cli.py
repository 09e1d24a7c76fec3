"""CLI interface using typer."""

import asyncio
import logging
import sys

import typer

from .config import settings
from .core import HttpFetcher

app = typer.Typer(
    name="scopecrawl",
    help="Bounded-depth, domain-restricted web crawler",
    no_args_is_help=True,
)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _configure_logging(verbose: bool):
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _default_domains(seeds: list[str]) -> list[str]:
    """Allow everything under each seed's origin."""
    from .links import origin_of

    return list(dict.fromkeys(origin_of(seed) + "/" for seed in seeds))


@app.command()
def crawl(
    seeds: list[str] = typer.Argument(..., help="Starting URLs"),
    domains: list[str] = typer.Option(None, "--domain", "-D", help="Allowed URL prefix (repeatable)"),
    max_depth: int = typer.Option(settings.max_depth, "--max-depth", "-d", min=0, help="Maximum link depth"),
    concurrency: int = typer.Option(settings.concurrency, "--concurrency", "-c", min=1, help="Concurrent workers"),
    queue_size: int = typer.Option(settings.queue_size, "--queue-size", min=0, help="Bounded queue size, 0 for unbounded"),
    words: bool = typer.Option(False, "--words", help="Print indexed words next to each URL"),
    stats: bool = typer.Option(False, "--stats", help="Print outcome counts to stderr"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging"),
):
    """Crawl from the seed URLs and print every visited URL."""
    from .crawl import run_crawl
    from .visited import CrawlStatus

    _configure_logging(verbose)
    allowed = list(domains or settings.domains or _default_domains(seeds))

    result = asyncio.run(run_crawl(
        seeds=list(seeds),
        domains=allowed,
        max_depth=max_depth,
        concurrency=concurrency,
        queue_size=queue_size,
    ))

    for uri, uri_words in result.index.items():
        if words:
            typer.echo(f"{uri}\t{' '.join(sorted(uri_words))}")
        else:
            typer.echo(uri)

    if stats:
        for status in CrawlStatus:
            count = result.count(status)
            if count:
                typer.echo(f"{status.value}: {count}", err=True)


async def _index(url: str):
    from .indexer import index_page
    from .tokens import tokenize

    fetcher = HttpFetcher.from_settings()
    try:
        response = await fetcher.fetch(url)
    finally:
        await fetcher.close()
    return response, index_page(url, tokenize(response.text))


@app.command()
def index(
    url: str = typer.Argument(..., help="URL to index"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging"),
):
    """Fetch and index a single URL."""
    from .errors import FetchError

    _configure_logging(verbose)
    try:
        response, page = asyncio.run(_index(url))
    except FetchError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    typer.echo(f"URL: {page.uri}")
    typer.echo(f"Status: {response.status}")
    if not page.complete:
        typer.echo("Warning: markup stream ended early", err=True)
    typer.echo(f"Words ({len(page.words)}): {' '.join(sorted(page.words))}")
    typer.echo(f"Links ({len(page.links)}):")
    for link in page.links:
        typer.echo(f"  {link}")


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"scopecrawl {__version__}")


if __name__ == "__main__":
    app()
