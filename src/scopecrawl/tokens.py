"""Markup tokenization into a stream of tag and text events using selectolax."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from selectolax.parser import HTMLParser, Node

from .errors import ParseError

TEXT_TAG = "-text"


@dataclass(frozen=True)
class StartTag:
    """An element was opened."""
    name: str
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class EndTag:
    """An element was closed."""
    name: str


@dataclass(frozen=True)
class Text:
    """A run of character data."""
    data: str


Event = StartTag | EndTag | Text


def _is_element(node: Node) -> bool:
    # Comments, doctype and other specials carry tags like "_comment" or "-text"
    return bool(node.tag) and node.tag[0] not in "-_!"


def tokenize(html: str) -> Iterator[Event]:
    """
    Parse HTML and yield events in document order.

    Every element yields a StartTag when entered and an EndTag when left, text
    nodes yield Text. Script and style bodies arrive as plain Text events, the
    same way an HTML tokenizer reads them as raw text. Character references
    in text are decoded.

    Malformed markup is repaired by the parser, so the stream never breaks
    off midway; ParseError is only raised up front.

    Raises:
        ParseError: the document could not be parsed at all.
    """
    try:
        tree = HTMLParser(html)
    except (TypeError, ValueError) as e:
        raise ParseError(str(e)) from e

    root = tree.root
    if root is None:
        return

    # Iterative walk, deeply nested markup must not hit the recursion limit
    stack: list[tuple[Node, bool]] = [(root, False)]
    while stack:
        node, leaving = stack.pop()
        if leaving:
            yield EndTag(node.tag)
            continue

        if node.tag == TEXT_TAG:
            data = node.text(deep=False)
            if data:
                yield Text(data)
            continue

        if not _is_element(node):
            continue

        attrs = {name: value or "" for name, value in node.attributes.items()}
        yield StartTag(node.tag, attrs)

        stack.append((node, True))
        children = list(node.iter(include_text=True))
        stack.extend((child, False) for child in reversed(children))
