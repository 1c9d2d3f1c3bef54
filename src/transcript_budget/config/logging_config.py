"""Logging configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging configuration for the ``transcript_budget`` logger.

    Attributes:
        level: Minimum log level.
        format: Log record format string.
        date_format: Timestamp format.
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Minimum log level",
    )
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        description="Log record format string",
    )
    date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Timestamp format",
    )
