"""Query parsing utilities.

This module turns raw search input into scoring terms and a page size.
"""

import re

# Terms are separated by any run of commas and whitespace
_TERM_SEPARATOR = re.compile(r"[,\s]+")

DEFAULT_SEARCH_LIMIT = 10
MAX_SEARCH_LIMIT = 20


def parse_query(query: str) -> list[str]:
    """Split a raw query into lowercase terms.

    Empty tokens are dropped. Terms keep their input order and duplicates
    are kept, so "nodejs, nodejs" yields two terms.

    Args:
        query: Raw query string

    Returns:
        List of lowercase terms (empty for a blank query)
    """
    return [term for term in _TERM_SEPARATOR.split(query.lower()) if term]


def clamp_limit(
    limit: int | None,
    default: int = DEFAULT_SEARCH_LIMIT,
    maximum: int = MAX_SEARCH_LIMIT,
) -> int:
    """Normalize a requested page size.

    Absent, non-positive and over-maximum values all fall back to the
    default rather than being clamped to the nearest bound.
    """
    if limit is None or limit <= 0 or limit > maximum:
        return default
    return limit
