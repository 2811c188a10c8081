"""API endpoint modules for version 1."""

from .forums import router as forums_router
from .posts import router as posts_router

__all__ = [
    "forums_router",
    "posts_router",
]
