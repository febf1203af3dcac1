"""Search coordination and identifier lookup.

The coordinator scores every document in the store, drops non-matches,
ranks the rest and turns them into SearchResult models. The lookup
service is a thin read-through to the store.
"""

import logging

from ..models import SearchResult
from .core.document import KnowledgeDocument
from .core.query import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT, clamp_limit, parse_query
from .scoring import calculate_score
from .store import DocumentStore

logger = logging.getLogger(__name__)

SUMMARY_MAX_CHARS = 200
ELLIPSIS = "..."


def summarize(description: str, max_chars: int = SUMMARY_MAX_CHARS) -> str:
    """Truncate a description to max_chars, ending with '...' when cut."""
    if len(description) <= max_chars:
        return description
    return description[: max_chars - len(ELLIPSIS)] + ELLIPSIS


def extract_tags(document: KnowledgeDocument) -> list[str]:
    """Collect tags for a document.

    Order: document type, declared tags, then lowercased framework,
    language and nested type. Empty values are skipped and duplicates
    keep their first position.
    """
    view = document.view
    candidates = [
        document.type,
        *view.tags,
        view.framework.lower(),
        view.language.lower(),
        view.type.lower(),
    ]

    seen: set[str] = set()
    tags: list[str] = []
    for tag in candidates:
        if tag and tag not in seen:
            seen.add(tag)
            tags.append(tag)
    return tags


def to_search_result(
    document: KnowledgeDocument,
    score: float,
    summary_max_chars: int = SUMMARY_MAX_CHARS,
) -> SearchResult:
    return SearchResult(
        id=document.id,
        name=document.display_name,
        summary=summarize(document.view.description, summary_max_chars),
        type=document.type,
        tags=extract_tags(document),
        score=score,
    )


class SearchCoordinator:
    """
    Ranks store documents against a keyword query.

    Ties on score keep the store's insertion order (sorted source path
    order), so repeated searches return identical sequences.
    """

    def __init__(
        self,
        store: DocumentStore,
        default_limit: int = DEFAULT_SEARCH_LIMIT,
        max_limit: int = MAX_SEARCH_LIMIT,
        summary_max_chars: int = SUMMARY_MAX_CHARS,
    ):
        self._store = store
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.summary_max_chars = summary_max_chars

    def rank(self, terms: list[str]) -> list[tuple[KnowledgeDocument, float]]:
        """Score all documents and return the matches, best first."""
        scored = []
        for doc in self._store:
            score = calculate_score(doc, terms)
            if score > 0:
                scored.append((doc, score))

        # list.sort is stable: equal scores stay in store order
        scored.sort(key=lambda item: item[1], reverse=True)
        return scored

    def search(self, raw_query: str, limit: int | None = None) -> list[SearchResult]:
        """
        Search the store.

        Args:
            raw_query: Comma or whitespace separated terms
            limit: Requested page size; invalid values use the default

        Returns:
            Up to `limit` results ordered by descending score
        """
        terms = parse_query(raw_query)
        page_size = clamp_limit(limit, self.default_limit, self.max_limit)

        ranked = self.rank(terms)
        logger.debug(
            f"Search terms={terms} matched {len(ranked)}/{len(self._store)} items, "
            f"returning {min(page_size, len(ranked))}"
        )

        return [
            to_search_result(doc, score, self.summary_max_chars)
            for doc, score in ranked[:page_size]
        ]


class LookupService:
    """Direct identifier to document retrieval."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def get(self, knowledge_id: str) -> KnowledgeDocument:
        """
        Raises:
            KnowledgeNotFoundError: If the identifier is unknown
        """
        return self._store.get(knowledge_id)
