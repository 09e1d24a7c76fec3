"""Build a page index (words and outbound links) from a markup event stream."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import ParseError
from .tokens import EndTag, Event, StartTag, Text

logger = logging.getLogger(__name__)

# Tokens are maximal runs of word characters
WORD_SPLIT = re.compile(r"\W+")


@dataclass(frozen=True)
class Page:
    """Indexed content of a single fetched page."""
    uri: str
    words: frozenset[str]
    links: tuple[str, ...]
    complete: bool = True


def split_words(text: str) -> list[str]:
    """Split text into lower-cased, non-empty word tokens."""
    return [token.lower() for token in WORD_SPLIT.split(text) if token]


def index_page(uri: str, events: Iterable[Event]) -> Page:
    """
    Consume a markup event stream and return the page it describes.

    Text inside <script> blocks is not indexed. Anchors are collected no
    matter where they appear. A ParseError from the stream ends indexing
    early; the page built so far is returned with complete=False.
    """
    words: set[str] = set()
    links: list[str] = []
    recording = True
    complete = True

    try:
        for event in events:
            if isinstance(event, StartTag):
                if event.name == "a" and event.attrs:
                    links.append(event.attrs.get("href", ""))
                elif event.name == "script":
                    recording = False
            elif isinstance(event, EndTag):
                if event.name == "script":
                    recording = True
            elif isinstance(event, Text) and recording:
                words.update(split_words(event.data))
    except ParseError as e:
        logger.warning("Markup stream error on %s: %s", uri, e)
        complete = False

    return Page(uri=uri, words=frozenset(words), links=tuple(links), complete=complete)
