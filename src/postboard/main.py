# src/postboard/main.py
"""Main entry point for the Postboard application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from postboard.api.v1 import posts_router
from postboard.core.settings import settings
from postboard.services.media_store import MediaStoreClient, load_media_store_config
from postboard.services.post_service import NotFoundError

logger = logging.getLogger("postboard")

# Initialize FastAPI app
app = FastAPI(
    title="Postboard API",
    description="Per-user blog posts with hosted images",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(posts_router, prefix="/api/v1")


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": exc.message})


@app.on_event("startup")
async def on_startup() -> None:
    logger.setLevel(settings.log_level.upper())
    media_store = MediaStoreClient(load_media_store_config())
    if not media_store.enabled:
        logger.warning("Cloudinary is not configured; image uploads will fail")
    app.state.media_store = media_store


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run("postboard.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
