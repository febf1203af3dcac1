"""Scoring engine for knowledge search.

This package provides the keyword scoring algorithm:
- Field-weighted substring matching per term
- Completeness bonus/penalty across terms
- Exact framework and name bonuses for recipes and patterns

Usage:
    from zerops_kb.engine.scoring import calculate_score
"""

from .constants import (
    CONTENT_FALLBACK_WEIGHT,
    DESCRIPTION_WEIGHT,
    EMPTY_QUERY_SCORE,
    EXACT_FRAMEWORK_BONUS,
    EXACT_MATCH_TYPES,
    FRAMEWORK_WEIGHT,
    FULL_MATCH_MULTIPLIER,
    ID_OR_NAME_WEIGHT,
    LANGUAGE_WEIGHT,
    NAME_MATCH_BONUS,
)
from .keyword_scorer import calculate_score, score_term

__all__ = [
    # Constants
    "CONTENT_FALLBACK_WEIGHT",
    "DESCRIPTION_WEIGHT",
    "EMPTY_QUERY_SCORE",
    "EXACT_FRAMEWORK_BONUS",
    "EXACT_MATCH_TYPES",
    "FRAMEWORK_WEIGHT",
    "FULL_MATCH_MULTIPLIER",
    "ID_OR_NAME_WEIGHT",
    "LANGUAGE_WEIGHT",
    "NAME_MATCH_BONUS",
    # Keyword scorer
    "calculate_score",
    "score_term",
]
