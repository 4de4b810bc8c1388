import logging
import sys
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    app_name: str = "Stock Dashboard API"
    app_version: str = "1.0.0"
    environment: str = "local"
    log_level: str = "INFO"

    # Frontend
    frontend_url: str = "http://localhost:3000"

    # Stock data
    default_symbol: str = "AAPL"
    default_search_query: str = "Apple"
    history_days: int = 5
    search_result_limit: int = 10
    search_fetch_count: int = 25
    quote_cache_seconds: int = 60
    search_cache_seconds: int = 300

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Send log records to stdout, which Lambda forwards to CloudWatch."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
