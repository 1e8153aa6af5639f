"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from postboard.core.security import InvalidTokenError, decode_user_id
from postboard.db.session import get_db
from postboard.models import User
from postboard.repositories.post_repo import PostRepository
from postboard.services.media_store import MediaStoreClient
from postboard.services.post_service import PostService

# HTTP Bearer scheme for JWT authentication
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
    db: SessionDep,
) -> User:
    """Get the current authenticated user from JWT token.

    Args:
        credentials: HTTP Bearer token credentials
        db: Database session

    Returns:
        User object for the authenticated user

    Raises:
        HTTPException: If token is invalid or user not found
    """
    try:
        user_id = decode_user_id(credentials.credentials)
    except InvalidTokenError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err

    user = db.get(User, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


def get_media_store(request: Request) -> MediaStoreClient:
    """Return the media store client created at application startup."""
    return request.app.state.media_store


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]
MediaStoreDep = Annotated[MediaStoreClient, Depends(get_media_store)]


def get_post_service(db: SessionDep, media_store: MediaStoreDep) -> PostService:
    """Build the post service for the current request."""
    return PostService(PostRepository(db), media_store)


PostServiceDep = Annotated[PostService, Depends(get_post_service)]
