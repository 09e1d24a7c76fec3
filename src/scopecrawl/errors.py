"""Errors raised while fetching and parsing pages."""


class CrawlError(Exception):
    """Base class for crawler errors."""


class FetchError(CrawlError):
    """A page could not be fetched because of a transport-level failure."""

    def __init__(self, uri: str, cause: Exception):
        super().__init__(f"Can't fetch {uri}: {cause}")
        self.uri = uri
        self.cause = cause


class ParseError(CrawlError):
    """The markup stream broke off before its end."""
