"""Logging setup for transcript-budget.

Configures the ``transcript_budget`` parent logger so every module logger
(``transcript_budget.context.manager``, ``transcript_budget.tokens.serialization``, ...)
inherits its handler and level.
"""

from __future__ import annotations

import logging

from transcript_budget.config.logging_config import LoggingConfig

LOGGER_NAME = "transcript_budget"
_HANDLER_NAME = "transcript_budget.console"


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Configure the package logger with a console handler.

    Safe to call repeatedly: the existing handler is reconfigured instead
    of a second one being added.

    Args:
        config: Logging configuration. Uses defaults if not provided.

    Returns:
        The configured ``transcript_budget`` logger.
    """
    config = config or LoggingConfig()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.level)

    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)

    handler.setLevel(config.level)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))
    return logger
