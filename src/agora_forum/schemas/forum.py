"""Forum-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from .post import PostResponse


class ForumResponse(BaseModel):
    """Schema for forum information returned by the API."""

    id: str
    name: str | None = None
    posts: list[PostResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
