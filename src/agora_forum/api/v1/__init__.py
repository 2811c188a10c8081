"""Version 1 API endpoints."""

from .endpoints import forums_router, posts_router

__all__ = [
    "forums_router",
    "posts_router",
]
