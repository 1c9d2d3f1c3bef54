"""Root settings for transcript-budget.

Priority order (highest first):

1. Init kwargs (including values loaded by ``BudgetSettings.from_yaml``)
2. Environment variables (``TRANSCRIPT_BUDGET_`` prefix, ``__`` for nesting)
3. ``.env`` dotenv file
4. Field defaults

Example:
    TRANSCRIPT_BUDGET_BUDGET__MAX_TOKENS=8192
    TRANSCRIPT_BUDGET_ESTIMATOR__CHARACTERS_PER_TOKEN=4.0
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from transcript_budget.config.logging_config import LoggingConfig
from transcript_budget.context.config import BudgetConfig
from transcript_budget.errors import ConfigurationError
from transcript_budget.tokens.config import EstimatorConfig

ENV_PREFIX = "TRANSCRIPT_BUDGET_"
ENV_DELIMITER = "__"
DEFAULT_ENCODING = "utf-8"


class BudgetSettings(BaseSettings):
    """Settings for token estimation, budgeting and logging."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter=ENV_DELIMITER,
        env_file=".env",
        env_file_encoding=DEFAULT_ENCODING,
        case_sensitive=False,
        extra="ignore",
    )

    estimator: EstimatorConfig = Field(
        default_factory=EstimatorConfig,
        description="Token estimation calibration",
    )
    budget: BudgetConfig = Field(
        default_factory=BudgetConfig,
        description="Safety margin and context limit settings",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> BudgetSettings:
        """Load settings from a YAML file.

        Values in the file take priority over environment variables.

        Args:
            path: Path to the YAML settings file.

        Returns:
            Loaded settings.

        Raises:
            ConfigurationError: If the file cannot be read, is not valid
                YAML, is not a mapping, or contains invalid values.
        """
        path = Path(path)

        try:
            raw = path.read_text(encoding=DEFAULT_ENCODING)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read settings file: {path}", cause=e, config_key=str(path)
            ) from e

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in settings file: {path}", cause=e, config_key=str(path)
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file must contain a mapping: {path}",
                config_key=str(path),
                expected="mapping",
                actual=type(data).__name__,
            )

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings in {path}", cause=e, config_key=str(path)
            ) from e
