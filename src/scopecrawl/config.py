"""Configuration using pydantic-settings."""

from pydantic_settings import BaseSettings

from . import __version__


class CrawlerSettings(BaseSettings):
    """Crawler configuration."""

    timeout: float = 10.0
    user_agent: str = f"scopecrawl/{__version__}"
    max_connections: int = 100
    max_keepalive_connections: int = 20

    max_depth: int = 2
    concurrency: int = 10
    queue_size: int = 0  # 0 means unbounded
    domains: list[str] = []

    log_level: str = "WARNING"

    model_config = {"env_prefix": "CRAWLER_"}


settings = CrawlerSettings()
