"""Service-level orchestration of post reads and writes."""
from __future__ import annotations

import logging

from sqlalchemy import Row

from postboard.models.post import Post
from postboard.repositories.post_repo import PostRepository
from postboard.schemas.post import PostCreate, PostUpdate
from postboard.services.media_store import MediaStoreClient

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category not found"
POST_NOT_FOUND = "Post not found"


class NotFoundError(LookupError):
    """Raised when a referenced category or an owned post does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PostService:
    """Coordinates persistence and media store calls for the post endpoints.

    Ownership checks answer "not found" for posts that exist but belong to
    someone else.
    """

    def __init__(self, repo: PostRepository, media_store: MediaStoreClient) -> None:
        self.repo = repo
        self.media_store = media_store

    def list_posts(self, user_id: int) -> list[Row]:
        """Return the caller's post summaries, newest first."""
        return self.repo.list_summaries_for_user(user_id)

    def get_post(self, post_id: int) -> Post | None:
        """Return a post by id, or None. Not restricted to the caller's posts."""
        return self.repo.get_by_id(post_id)

    async def create_post(self, user_id: int, data: PostCreate) -> Post:
        """Upload the image and insert a post owned by ``user_id``.

        Raises:
            NotFoundError: If the category does not exist. Nothing is uploaded
                in that case.
            MediaStoreError: If the upload fails.
        """
        if not self.repo.category_exists(data.category_id):
            raise NotFoundError(CATEGORY_NOT_FOUND)

        image = await self.media_store.upload(data.img)

        post = self.repo.create(
            title=data.title,
            content=data.content,
            image_url=image.url,
            image_id=image.public_id,
            user_id=user_id,
            category_id=data.category_id,
        )
        logger.info("User %d created post %d", user_id, post.id)
        return post

    async def update_post(self, user_id: int, post_id: int, data: PostUpdate) -> None:
        """Rewrite a post owned by ``user_id``, replacing its image when one is given.

        The old image is removed before the new one is uploaded; neither step
        is rolled back if a later one fails.

        Raises:
            NotFoundError: If the category is missing or the caller does not own the post.
            MediaStoreError: If removing the old image or uploading the new one fails.
        """
        if not self.repo.category_exists(data.category_id):
            raise NotFoundError(CATEGORY_NOT_FOUND)

        post = self.repo.get_owned(post_id, user_id)
        if post is None:
            raise NotFoundError(POST_NOT_FOUND)

        image_url = post.image_url
        image_id = post.image_id
        if data.img:
            if image_id:
                await self.media_store.remove(image_id)
            image = await self.media_store.upload(data.img)
            image_url = image.url
            image_id = image.public_id

        self.repo.update(
            post_id,
            title=data.title,
            content=data.content,
            image_url=image_url,
            image_id=image_id,
            category_id=data.category_id,
        )
        logger.info("User %d updated post %d", user_id, post_id)

    async def delete_post(self, user_id: int, post_id: int) -> None:
        """Delete a post owned by ``user_id`` together with its hosted image.

        Raises:
            NotFoundError: If the caller does not own a post with that id.
            MediaStoreError: If removing the image fails; the row is kept.
        """
        post = self.repo.get_owned(post_id, user_id)
        if post is None:
            raise NotFoundError(POST_NOT_FOUND)

        # Presence is judged on the URL while removal goes through the handle;
        # both are always written together.
        if post.image_url:
            await self.media_store.remove(post.image_id)

        self.repo.delete_owned(post_id, user_id)
        logger.info("User %d deleted post %d", user_id, post_id)
