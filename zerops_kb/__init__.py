"""Zerops Knowledge Base API - in-memory semantic search over platform knowledge."""

__version__ = "1.0.0"
