"""
Application settings + logging setup.

Settings are read from environment variables (prefix CHESS_) so the same code runs in tests, locally and deployed.
"""

import logging
import os
from typing import Self

from pydantic import BaseModel, field_validator

ENV_PREFIX = "CHESS_"


class Settings(BaseModel):
    database_url: str = "sqlite:///chess_sessions.db"
    log_level: str = "INFO"
    echo_sql: bool = False
    search_depth: int = 3

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("search_depth")
    @classmethod
    def validate_search_depth(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"Search depth must be at least 1 ply, got {value}")
        return value

    @classmethod
    def from_env(cls) -> Self:
        """Only pass the variables that are actually set, so the defaults above stay in charge otherwise."""
        values = {
            name: os.environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in os.environ
        }
        return cls(**values)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
