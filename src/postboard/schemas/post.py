"""Post-related Pydantic schemas."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints

# Leading and trailing whitespace is removed before length limits apply.
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True)]


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("must be an integer, not a boolean")
    return value


# Lax int coercion would otherwise turn true/false into 1/0.
CategoryId = Annotated[int, BeforeValidator(_reject_bool)]


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: TrimmedStr = Field(..., min_length=1, max_length=255, description="Post title")
    content: TrimmedStr = Field(..., min_length=1, max_length=5000, description="Post body")
    category_id: CategoryId = Field(..., alias="categoryId", description="Existing category ID")
    img: str = Field(
        ...,
        description="Image payload (data URI, base64 or remote URL) sent to the media store",
    )

    model_config = ConfigDict(populate_by_name=True)


class PostUpdate(BaseModel):
    """Schema for updating an existing post.

    Unlike creation, empty titles and bodies are accepted. Omitting ``img``
    keeps the current image.
    """

    category_id: CategoryId = Field(..., alias="categoryId", description="Existing category ID")
    title: TrimmedStr = Field(..., max_length=255, description="Post title")
    content: TrimmedStr = Field(..., max_length=5000, description="Post body")
    img: str | None = Field(None, description="Replacement image payload")

    model_config = ConfigDict(populate_by_name=True)


class PostSummary(BaseModel):
    """Row returned by the post listing, with the body cut to a preview."""

    id: int
    title: str
    content: str
    image_url: str | None = Field(None, alias="imageUrl")
    category: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class PostResponse(BaseModel):
    """Schema for a full post row returned by the API."""

    id: int
    title: str
    content: str
    image_url: str | None = Field(None, alias="imageUrl")
    image_id: str | None = Field(None, alias="imageId")
    category_id: int = Field(..., alias="categoryId")
    user_id: int = Field(..., alias="userId")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class MessageResponse(BaseModel):
    """Plain confirmation body for write operations."""

    message: str
