"""Exceptions raised by the knowledge engine."""


class KnowledgeBaseError(Exception):
    """Base class for knowledge engine errors."""


class KnowledgeNotFoundError(KnowledgeBaseError, LookupError):
    """No knowledge document exists for the requested identifier."""

    def __init__(self, knowledge_id: str):
        super().__init__(f"Knowledge not found: {knowledge_id}")
        self.knowledge_id = knowledge_id


class DocumentParseError(KnowledgeBaseError):
    """A knowledge resource could not be decoded as JSON."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class StoreFrozenError(KnowledgeBaseError):
    """The document store was modified after its build completed."""
