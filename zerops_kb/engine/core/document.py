"""Document data structures for the knowledge engine.

This module contains the core data structures for representing
knowledge documents and the typed view of their loosely-typed content.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from ..errors import DocumentParseError

RECIPE_PREFIX = "recipe-"
RECIPE_TYPE = "recipe"


@dataclass(frozen=True)
class ContentView:
    """Typed view over the optional fields of a document's content.

    Absent or mistyped fields default to empty values, so scoring and
    tag extraction never have to probe the raw payload.

    Attributes:
        description: Free-text description of the item
        framework: Framework name (e.g. "laravel")
        language: Programming language (e.g. "php")
        type: Nested item type declared by the document itself
        tags: Declared tags, non-string entries dropped
    """

    description: str = ""
    framework: str = ""
    language: str = ""
    type: str = ""
    tags: tuple[str, ...] = ()

    @classmethod
    def from_content(cls, content: Any) -> "ContentView":
        """Build a view from parsed content; non-mapping content yields an empty view."""
        if not isinstance(content, dict):
            return cls()

        def text(key: str) -> str:
            value = content.get(key)
            return value if isinstance(value, str) else ""

        raw_tags = content.get("tags")
        tags: tuple[str, ...] = ()
        if isinstance(raw_tags, list):
            tags = tuple(tag for tag in raw_tags if isinstance(tag, str))

        return cls(
            description=text("description"),
            framework=text("framework"),
            language=text("language"),
            type=text("type"),
            tags=tags,
        )


@dataclass(frozen=True)
class KnowledgeDocument:
    """A knowledge item indexed by its semantic identifier.

    Attributes:
        id: Semantic identifier in the form "{type}/{name}"
        name: Kebab-case name derived from the source filename
        type: Item type derived from the source directory
        content: Parsed JSON payload
        raw: Decoded source text, used for substring fallback matching
        view: Typed view of the recognized content fields
    """

    id: str
    name: str
    type: str
    content: Any
    raw: str
    view: ContentView = field(default_factory=ContentView)

    @property
    def display_name(self) -> str:
        return format_name(self.name)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "content": self.content,
        }


def format_name(name: str) -> str:
    """Convert a kebab-case name to Title Case.

    Only the first letter of each part is upper-cased; the rest of the
    part is left untouched, so "nextjs-SSR" becomes "Nextjs SSR".
    """
    parts = [part[:1].upper() + part[1:] if part else part for part in name.split("-")]
    return " ".join(parts)


def derive_identity(path: str) -> tuple[str, str] | None:
    """Derive (type, name) from a resource path.

    The immediate parent directory is the type and the filename stem is
    the name. A "recipe-" prefix is stripped from the name and forces the
    type to "recipe" whatever the parent directory.

    Args:
        path: Slash-separated resource path including the base path

    Returns:
        (type, name), or None when the path has fewer than 3 segments
    """
    parts = path.split("/")
    if len(parts) < 3:
        return None

    doc_type = parts[-2]
    filename = parts[-1]
    name = filename[: -len(".json")] if filename.endswith(".json") else filename

    if name.startswith(RECIPE_PREFIX):
        name = name[len(RECIPE_PREFIX) :]
        doc_type = RECIPE_TYPE

    return doc_type, name


def parse_document(path: str, data: bytes) -> KnowledgeDocument | None:
    """Parse a raw JSON resource into a KnowledgeDocument.

    Args:
        path: Slash-separated resource path including the base path
        data: Raw resource bytes

    Returns:
        The parsed document, or None when the path cannot yield an identity

    Raises:
        DocumentParseError: If the bytes are not valid UTF-8 JSON
    """
    identity = derive_identity(path)
    if identity is None:
        return None
    doc_type, name = identity

    try:
        raw = data.decode("utf-8")
        content = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DocumentParseError(path, str(e)) from e

    return KnowledgeDocument(
        id=f"{doc_type}/{name}",
        name=name,
        type=doc_type,
        content=content,
        raw=raw,
        view=ContentView.from_content(content),
    )
