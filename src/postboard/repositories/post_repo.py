"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import Row, delete, func, select, update
from sqlalchemy.orm import Session

from postboard.models.category import Category
from postboard.models.post import Post

__all__ = ["PostRepository", "SUMMARY_CONTENT_LENGTH"]

# Listing previews carry at most this many characters of the body.
SUMMARY_CONTENT_LENGTH = 100


class PostRepository:
    """Thin wrapper around database access for post entities.

    Every method issues a single statement; writes are committed immediately.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def category_exists(self, category_id: int) -> bool:
        """Return True if a category row with ``category_id`` exists."""
        stmt = select(1).select_from(Category).where(Category.id == category_id).limit(1)
        return self.session.execute(stmt).first() is not None

    def list_summaries_for_user(self, user_id: int) -> list[Row]:
        """Return the user's posts with category names, newest id first."""
        stmt = (
            select(
                Post.id,
                Post.title,
                func.substr(Post.content, 1, SUMMARY_CONTENT_LENGTH).label("content"),
                Post.image_url,
                Category.name.label("category"),
                Post.created_at,
                Post.updated_at,
            )
            .join(Category, Category.id == Post.category_id)
            .where(Post.user_id == user_id)
            .order_by(Post.id.desc())
        )
        return list(self.session.execute(stmt).all())

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier regardless of owner."""
        stmt = select(Post).where(Post.id == post_id).limit(1)
        return self.session.execute(stmt).scalars().first()

    def get_owned(self, post_id: int, user_id: int) -> Post | None:
        """Return a post only if it belongs to ``user_id``."""
        stmt = select(Post).where(Post.id == post_id, Post.user_id == user_id).limit(1)
        return self.session.execute(stmt).scalars().first()

    def create(
        self,
        *,
        title: str,
        content: str,
        image_url: str | None,
        image_id: str | None,
        user_id: int,
        category_id: int,
    ) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(
            title=title,
            content=content,
            image_url=image_url,
            image_id=image_id,
            user_id=user_id,
            category_id=category_id,
        )
        self.session.add(post)
        self.session.commit()
        self.session.refresh(post)
        return post

    def update(
        self,
        post_id: int,
        *,
        title: str,
        content: str,
        image_url: str | None,
        image_id: str | None,
        category_id: int,
    ) -> int:
        """Overwrite the editable columns of a post and return the affected row count.

        Scoped by id only; callers are expected to have checked ownership.
        """
        stmt = (
            update(Post)
            .where(Post.id == post_id)
            .values(
                title=title,
                content=content,
                image_url=image_url,
                image_id=image_id,
                category_id=category_id,
            )
        )
        result = self.session.execute(stmt)
        self.session.commit()
        return result.rowcount

    def delete_owned(self, post_id: int, user_id: int) -> int:
        """Delete a post owned by ``user_id`` and return the affected row count."""
        stmt = delete(Post).where(Post.id == post_id, Post.user_id == user_id)
        result = self.session.execute(stmt)
        self.session.commit()
        return result.rowcount
