#!/usr/bin/env python3
"""Settings example.

This example demonstrates:
- Loading settings from environment variables
- Loading settings from a YAML file
- Building a budget manager from settings

Environment variables use the TRANSCRIPT_BUDGET_ prefix with "__" for
nesting, e.g. TRANSCRIPT_BUDGET_BUDGET__MAX_TOKENS=8192.
"""

import sys
from pathlib import Path

from transcript_budget import BudgetManager, BudgetSettings, ConfigurationError, setup_logging


def main():
    if len(sys.argv) > 1:
        try:
            settings = BudgetSettings.from_yaml(Path(sys.argv[1]))
        except ConfigurationError as e:
            print(f"Could not load settings: {e}")
            return
    else:
        settings = BudgetSettings()

    setup_logging(settings.logging)
    manager = BudgetManager.from_settings(settings)

    print(f"Characters per token: {manager.estimator.config.characters_per_token}")
    print(f"Max tokens: {manager.config.max_tokens}")
    print(f"Limit threshold: {manager.limit_threshold_tokens()} tokens")


if __name__ == "__main__":
    main()
