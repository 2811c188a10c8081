"""Post-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from .comment import CommentResponse


class PostCreate(BaseModel):
    """Schema for creating a new post; the post engine checks the lengths."""

    title: str
    content: str


class PostResponse(BaseModel):
    """Schema for post information returned by the API.

    ``candelete`` is present only when the viewer authored the post.
    """

    id: int
    title: str
    content: str
    author: str
    comments: list[CommentResponse] = Field(default_factory=list)
    candelete: bool | None = None

    model_config = ConfigDict(from_attributes=True)
