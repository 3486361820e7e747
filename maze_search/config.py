"""Application configuration using Pydantic settings."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent

STRATEGY_NAMES = ("bfs", "dfs", "dijkstra", "astar")

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZE_SEARCH_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Maze Search"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Search
    default_strategy: str = "bfs"
    auto_reset: bool = True  # reset a grid left marked by an earlier search

    @field_validator("default_strategy")
    @classmethod
    def validate_default_strategy(cls, v: str) -> str:
        """Normalize and check the strategy name."""
        v = v.strip().lower()
        if v not in STRATEGY_NAMES:
            raise ValueError(
                f"Unknown strategy '{v}'. Must be one of: {', '.join(STRATEGY_NAMES)}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'")
        return v

    @property
    def effective_log_level(self) -> str:
        if self.debug:
            return "DEBUG"
        return self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging with the project format."""
    if level is None:
        level = get_settings().effective_log_level
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        force=True,
    )
