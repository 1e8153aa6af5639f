# src/postboard/api/v1/endpoints/posts.py
"""Post-related endpoints for the Postboard API."""

from fastapi import APIRouter, status

from postboard.api.v1.dependencies import CurrentUserDep, PostServiceDep
from postboard.schemas.post import (
    MessageResponse,
    PostCreate,
    PostResponse,
    PostSummary,
    PostUpdate,
)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostSummary])
async def list_posts(
    current_user: CurrentUserDep,
    service: PostServiceDep,
) -> list[PostSummary]:
    """List the caller's posts, newest first, with bodies cut to a preview.

    Returns:
        Every post owned by the caller; the listing is not paginated.
    """
    rows = service.list_posts(current_user.id)
    return [PostSummary.model_validate(row) for row in rows]


@router.get("/{post_id}", response_model=PostResponse | None)
async def get_post(
    post_id: int,
    current_user: CurrentUserDep,
    service: PostServiceDep,
) -> PostResponse | None:
    """Get a specific post by ID.

    Any authenticated caller may read any post. A missing post yields a
    ``null`` body rather than a 404.
    """
    post = service.get_post(post_id)
    if post is None:
        return None
    return PostResponse.model_validate(post)


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    payload: PostCreate,
    current_user: CurrentUserDep,
    service: PostServiceDep,
) -> MessageResponse:
    """Create a post after uploading its image.

    Args:
        payload: Validated post fields and image payload
        current_user: Authenticated user who will own the post
        service: Post service bound to this request

    Raises:
        NotFoundError: If the category does not exist
    """
    await service.create_post(current_user.id, payload)

    return MessageResponse(message="Post added successfully")


@router.patch(
    "/{post_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def update_post(
    post_id: int,
    payload: PostUpdate,
    current_user: CurrentUserDep,
    service: PostServiceDep,
) -> MessageResponse:
    """Update a post owned by the caller, optionally replacing its image.

    Raises:
        NotFoundError: If the category does not exist or the caller does not own the post
    """
    await service.update_post(current_user.id, post_id, payload)

    return MessageResponse(message="Post updated successfully")


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: int,
    current_user: CurrentUserDep,
    service: PostServiceDep,
) -> MessageResponse:
    """Delete a post owned by the caller along with its hosted image.

    Raises:
        NotFoundError: If the caller does not own a post with that ID
    """
    await service.delete_post(current_user.id, post_id)

    return MessageResponse(message="Post deleted successfully")
