"""Comment and vote Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt


class CommentCreate(BaseModel):
    """Schema for submitting a comment on a post.

    Length limits are enforced by the comment engine after the caller's
    identity is checked.
    """

    content: str


class CommentResponse(BaseModel):
    """Schema for a comment returned by the API; vote records stay internal."""

    id: int
    author: str
    content: str
    votes: int

    model_config = ConfigDict(from_attributes=True)


class CommentVoteCreate(BaseModel):
    """Schema for voting on a comment."""

    comment: StrictInt = Field(..., description="Comment id")
    vote: StrictBool = Field(..., description="true for upvote, false for downvote")


class MyVoteResponse(BaseModel):
    """The caller's current vote on a comment."""

    direction: int = Field(..., description="1 upvote, -1 downvote, 0 no vote")
