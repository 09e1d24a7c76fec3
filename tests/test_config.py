"""Tests for settings."""

from scopecrawl.config import CrawlerSettings


class TestCrawlerSettings:
    def test_defaults(self):
        """Defaults match the documented values."""
        settings = CrawlerSettings()
        assert settings.max_depth == 2
        assert settings.queue_size == 0
        assert settings.domains == []

    def test_env_override(self, monkeypatch):
        """CRAWLER_* variables override defaults."""
        monkeypatch.setenv("CRAWLER_CONCURRENCY", "3")
        monkeypatch.setenv("CRAWLER_DOMAINS", '["https://x.test"]')
        settings = CrawlerSettings()
        assert settings.concurrency == 3
        assert settings.domains == ["https://x.test"]
