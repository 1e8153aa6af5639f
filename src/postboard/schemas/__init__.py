# src/postboard/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .post import MessageResponse, PostCreate, PostResponse, PostSummary, PostUpdate

__all__ = [
    "MessageResponse",
    "PostCreate", "PostResponse", "PostSummary", "PostUpdate",
]
