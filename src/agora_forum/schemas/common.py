"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, Field


class Message(BaseModel):
    """Plain confirmation returned by mutations without a richer payload."""

    detail: str = Field(..., description="Human-readable outcome.")
