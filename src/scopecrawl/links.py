"""Link resolution and domain filtering."""

from collections.abc import Sequence


def origin_of(uri: str) -> str:
    """Return the scheme://host part of a URI (its first three '/' components)."""
    return "/".join(uri.split("/")[:3])


def resolve_link(link: str, page_uri: str) -> str:
    """
    Resolve a discovered link against the page it was found on.

    Only root-relative links ("/path") are rewritten, onto the page's origin.
    Every other form, absolute or not, is returned unchanged.
    """
    if link.startswith("/"):
        return origin_of(page_uri) + link
    return link


def is_allowed(uri: str, domains: Sequence[str]) -> bool:
    """Check whether a URI starts with one of the allowed domain prefixes."""
    return uri.startswith(tuple(domains))
