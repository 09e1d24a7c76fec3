"""Bounded-depth, domain-restricted async web crawler."""

__version__ = "0.1.0"
