"""Media store client for hosting post images on Cloudinary.

This module provides the MediaStoreClient class that wraps the Cloudinary SDK
for Postboard. It includes:

- SDK configuration from ``CLOUDINARY_URL`` or the split credential settings
- Image upload returning the durable URL and its deletion handle
- Image removal by deletion handle

The SDK is synchronous, so calls run in the threadpool to keep handlers awaitable.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
from fastapi.concurrency import run_in_threadpool

from postboard.core.settings import Settings, settings

# Configure logger for this module
logger = logging.getLogger(__name__)


class MediaStoreError(RuntimeError):
    """Base exception raised for media store failures."""


class MediaStoreNotConfiguredError(MediaStoreError):
    """Raised when an operation is attempted without Cloudinary credentials."""


@dataclass(frozen=True)
class MediaStoreConfig:
    """Immutable configuration for media store operations."""

    cloudinary_url: str | None
    cloud_name: str | None
    api_key: str | None
    api_secret: str | None
    upload_folder: str | None


@dataclass(frozen=True)
class UploadedImage:
    """Result of a successful upload."""

    url: str
    public_id: str


def load_media_store_config(source: Settings | None = None) -> MediaStoreConfig:
    """Build configuration object from application settings."""
    cfg = source or settings
    return MediaStoreConfig(
        cloudinary_url=cfg.cloudinary_url,
        cloud_name=cfg.cloudinary_cloud_name,
        api_key=cfg.cloudinary_api_key,
        api_secret=cfg.cloudinary_api_secret,
        upload_folder=cfg.cloudinary_upload_folder,
    )


class MediaStoreClient:
    """Cloudinary SDK wrapper used by the post service."""

    def __init__(self, config: MediaStoreConfig | None = None) -> None:
        self.config = config or load_media_store_config()
        self._configure_sdk()

    def _configure_sdk(self) -> None:
        # CLOUDINARY_URL wins over the split fields; the SDK only reads it from the environment.
        if self.config.cloudinary_url:
            os.environ["CLOUDINARY_URL"] = self.config.cloudinary_url
            cloudinary.reset_config()
        elif self.config.cloud_name:
            cloudinary.config(
                cloud_name=self.config.cloud_name,
                api_key=self.config.api_key,
                api_secret=self.config.api_secret,
            )
        cloudinary.config(secure=True)

    @property
    def enabled(self) -> bool:
        sdk_config = cloudinary.config()
        return bool(sdk_config.cloud_name and sdk_config.api_key and sdk_config.api_secret)

    def _ensure_enabled(self) -> None:
        if not self.enabled:
            raise MediaStoreNotConfiguredError("Cloudinary credentials are not configured")

    async def upload(self, payload: str) -> UploadedImage:
        """Upload an image and return its durable URL and deletion handle.

        Args:
            payload: Anything Cloudinary accepts as ``file``: a data URI,
                a base64 string or a remote URL.

        Raises:
            MediaStoreError: If the upload fails or the response lacks the expected fields.
        """
        self._ensure_enabled()
        options: dict[str, Any] = {}
        if self.config.upload_folder:
            options["folder"] = self.config.upload_folder

        try:
            result = await run_in_threadpool(cloudinary.uploader.upload, payload, **options)
        except cloudinary.exceptions.Error as exc:
            logger.warning("Image upload failed: %s", exc)
            raise MediaStoreError(f"Media store upload failed: {exc}") from exc

        url = result.get("secure_url")
        public_id = result.get("public_id")
        if not url or not public_id:
            raise MediaStoreError("Media store upload response is missing secure_url/public_id")

        logger.info("Uploaded image %s", public_id)
        return UploadedImage(url=url, public_id=public_id)

    async def remove(self, public_id: str | None) -> None:
        """Delete a previously uploaded image.

        The ``result`` field of the response ("ok", "not found") is logged and
        otherwise ignored.
        """
        self._ensure_enabled()
        try:
            result = await run_in_threadpool(cloudinary.uploader.destroy, public_id)
        except cloudinary.exceptions.Error as exc:
            logger.warning("Image removal of %s failed: %s", public_id, exc)
            raise MediaStoreError(f"Media store removal failed: {exc}") from exc

        logger.info("Removed image %s: %s", public_id, result.get("result"))
