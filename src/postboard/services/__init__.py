# src/postboard/services/__init__.py
"""Business logic services for the Postboard application."""

from .media_store import MediaStoreClient, MediaStoreError
from .post_service import NotFoundError, PostService

__all__ = [
    "MediaStoreClient",
    "MediaStoreError",
    "NotFoundError",
    "PostService",
]
