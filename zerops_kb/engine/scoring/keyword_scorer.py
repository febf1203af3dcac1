"""Keyword scoring for the knowledge search engine.

This module provides field-weighted substring relevance scoring using:
- Identifier/name, framework, language and description weights
- Raw content fallback for terms no field matched
- Completeness multiplier favouring documents that match every term
- Exact framework and name bonuses for recipes and patterns
"""

import logging

from ..core.document import KnowledgeDocument
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

logger = logging.getLogger(__name__)


def score_term(
    term: str,
    id_lower: str,
    name_lower: str,
    framework: str,
    language: str,
    description: str,
    content_lower: str,
) -> float:
    """Score a single lowercase term against pre-lowercased document fields.

    Field weights are summed, not maxed. The content fallback only fires
    when no field weight applied.
    """
    score = 0.0

    if term in id_lower or term in name_lower:
        score += ID_OR_NAME_WEIGHT
    if framework and term in framework:
        score += FRAMEWORK_WEIGHT
    if language and term in language:
        score += LANGUAGE_WEIGHT
    if description and term in description:
        score += DESCRIPTION_WEIGHT

    if score == 0 and term in content_lower:
        score += CONTENT_FALLBACK_WEIGHT

    return score


def calculate_score(document: KnowledgeDocument, terms: list[str]) -> float:
    """Calculate keyword relevance score for a document.

    Scoring factors:
    - Identifier or display name contains the term: 3.0
    - Framework contains the term: 2.5
    - Language contains the term: 2.0
    - Description contains the term: 1.5
    - Otherwise raw content contains the term: 0.5
    - Average over terms, doubled when every term matched, otherwise
      scaled by the fraction matched
    - Recipes and patterns: +5.0 per term equal to the framework,
      +2.0 per term found in the display name

    Args:
        document: The document to score.
        terms: Lowercase query terms.

    Returns:
        Relevance score; 0.0 means the document does not match.
    """
    if not terms:
        return EMPTY_QUERY_SCORE

    view = document.view
    id_lower = document.id.lower()
    name_lower = document.display_name.lower()
    content_lower = document.raw.lower()
    framework = view.framework.lower()
    language = view.language.lower()
    description = view.description.lower()

    total_score = 0.0
    matched_terms = 0

    for term in terms:
        term_score = score_term(
            term, id_lower, name_lower, framework, language, description, content_lower
        )
        if term_score > 0:
            matched_terms += 1
            total_score += term_score

    if matched_terms == 0:
        return 0.0

    term_count = len(terms)
    score = total_score / term_count

    if matched_terms == term_count:
        score *= FULL_MATCH_MULTIPLIER
    else:
        score *= matched_terms / term_count

    if document.type in EXACT_MATCH_TYPES:
        for term in terms:
            if framework and framework == term:
                score += EXACT_FRAMEWORK_BONUS
                logger.debug(f"Exact framework match: '{term}' → {document.id}")
            if term in name_lower:
                score += NAME_MATCH_BONUS

    return score
