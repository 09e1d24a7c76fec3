"""Core crawler components."""

from .fetcher import HttpFetcher
from .protocols import Fetcher, Response

__all__ = ["Fetcher", "Response", "HttpFetcher"]
