"""Token estimation.

Approximates token counts with a fixed characters-per-token ratio (4.5 by
default) rather than a real tokenizer. Structured values are costed by the
length of their serialized string form.

Standalone Usage:
    >>> from transcript_budget.tokens import EstimatorConfig, TokenEstimator, estimate_tokens
    >>> estimate_tokens("Hello, world!")
    3
    >>> estimator = TokenEstimator(EstimatorConfig(characters_per_token=4.0))
    >>> estimator.estimate_tokens("Hello, world!")
    4
"""

from transcript_budget.tokens.config import EstimatorConfig
from transcript_budget.tokens.estimator import TokenEstimator, default_estimator, estimate_tokens
from transcript_budget.tokens.serialization import Serializer, to_json_string

__all__ = [
    "EstimatorConfig",
    "Serializer",
    "TokenEstimator",
    "default_estimator",
    "estimate_tokens",
    "to_json_string",
]
