"""Scoring constants for the knowledge search engine.

This module contains all weights used by the keyword scorer:
- Per-term field weights
- Completeness multiplier
- Exact-match bonuses for recipe and pattern documents
"""

# ---------------------------------------------------------------------------
# Empty query: every document matches with the same minimal score.
# ---------------------------------------------------------------------------
EMPTY_QUERY_SCORE = 0.1

# ---------------------------------------------------------------------------
# Per-term field weights. A term may hit several fields; the weights add up.
# ---------------------------------------------------------------------------
ID_OR_NAME_WEIGHT = 3.0
FRAMEWORK_WEIGHT = 2.5
LANGUAGE_WEIGHT = 2.0
DESCRIPTION_WEIGHT = 1.5

# Only applies when no field above matched the term
CONTENT_FALLBACK_WEIGHT = 0.5

# ---------------------------------------------------------------------------
# Completeness: matching every term doubles the base score; partial matches
# are scaled by the fraction of terms matched.
# ---------------------------------------------------------------------------
FULL_MATCH_MULTIPLIER = 2.0

# ---------------------------------------------------------------------------
# Exact-match bonuses, added after the completeness multiplier.
# ---------------------------------------------------------------------------
EXACT_MATCH_TYPES = frozenset({"recipe", "patterns"})
EXACT_FRAMEWORK_BONUS = 5.0
NAME_MATCH_BONUS = 2.0
