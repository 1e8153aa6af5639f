# src/postboard/models/__init__.py
"""SQLAlchemy models for the Postboard application."""

from .category import Category
from .post import Post
from .user import User

__all__ = [
    "Category",
    "Post",
    "User",
]
