"""Tests for link resolution and domain filtering."""

from scopecrawl.links import is_allowed, origin_of, resolve_link


class TestResolveLink:
    def test_root_relative_link(self):
        """Root-relative links resolve onto the page origin."""
        assert resolve_link("/c/d", "https://example.com/a/b") == "https://example.com/c/d"

    def test_root_relative_from_origin_page(self):
        """Pages without a path still provide their origin."""
        assert resolve_link("/x", "https://example.com") == "https://example.com/x"

    def test_keeps_port(self):
        """The host component includes the port."""
        assert resolve_link("/x", "http://localhost:8080/a") == "http://localhost:8080/x"

    def test_absolute_link_unchanged(self):
        """Absolute links pass through."""
        assert resolve_link("https://other.test/y", "https://example.com/a") == "https://other.test/y"

    def test_other_relative_forms_unchanged(self):
        """Document-relative forms are not resolved."""
        for link in ("../x", "x", "#top", "?q=1", "mailto:a@example.com", ""):
            assert resolve_link(link, "https://example.com/a/b") == link

    def test_scheme_relative_treated_as_root_relative(self):
        """A leading '//' is still a leading '/'."""
        assert resolve_link("//cdn.test/a", "https://example.com/p") == "https://example.com//cdn.test/a"


class TestOriginOf:
    def test_origin(self):
        """Origin is scheme and host."""
        assert origin_of("https://example.com/a/b?c=1") == "https://example.com"


class TestIsAllowed:
    def test_matching_prefix(self):
        """A URI under an allowed prefix is accepted."""
        assert is_allowed("https://x.test/a", ["https://x.test"])

    def test_any_prefix_matches(self):
        """One matching prefix out of many is enough."""
        assert is_allowed("https://y.test/a", ["https://x.test", "https://y.test/"])

    def test_no_match(self):
        """URIs outside every prefix are rejected."""
        assert not is_allowed("https://other.test/y", ["https://x.test"])

    def test_exact_prefix_without_normalization(self):
        """Scheme and trailing slashes are compared literally."""
        assert not is_allowed("http://x.test/a", ["https://x.test"])
        assert not is_allowed("https://x.test", ["https://x.test/"])

    def test_plain_string_prefix(self):
        """Prefix matching is textual, not host-aware."""
        assert is_allowed("https://x.test.evil.com/", ["https://x.test"])

    def test_empty_allow_list(self):
        """An empty allow list accepts nothing."""
        assert not is_allowed("https://x.test/a", [])

    def test_unresolved_forms_rejected(self):
        """Relative leftovers do not match a domain prefix."""
        for link in ("../x", "#top", "mailto:a@x.test", ""):
            assert not is_allowed(link, ["https://x.test"])
