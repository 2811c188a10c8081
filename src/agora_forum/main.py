# src/agora_forum/main.py
"""Main entry point for the Agora forum application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from agora_forum.api.v1 import forums_router, posts_router
from agora_forum.core.settings import settings
from agora_forum.services.errors import ForumError, InternalError

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Posts, comments and votes nested under forums",
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
app.include_router(forums_router, prefix="/api/v1")
app.include_router(posts_router, prefix="/api/v1")


@app.exception_handler(ForumError)
async def forum_error_handler(request: Request, exc: ForumError) -> JSONResponse:
    """Render engine errors with the status code their kind maps to."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report malformed ids and bodies as 400 Bad Request."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_errors(exc)},
    )


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Turn unexpected store failures into a 500 without leaking internals."""
    logger.exception("Store failure handling %s %s", request.method, request.url.path)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, object]]:
    """Return validation errors without the raw input echoed back."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


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
    uvicorn.run("agora_forum.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
