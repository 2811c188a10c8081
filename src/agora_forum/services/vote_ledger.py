"""Per-user, per-comment vote bookkeeping."""
from __future__ import annotations

from typing import Final

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from agora_forum.models import CommentVote

__all__ = ["UPVOTE", "DOWNVOTE", "VoteLedger", "direction_from_flag"]

UPVOTE: Final[int] = 1
DOWNVOTE: Final[int] = -1


def direction_from_flag(vote: bool) -> int:
    """Translate the wire-level boolean (True = up) into a direction."""
    return UPVOTE if vote else DOWNVOTE


class VoteLedger:
    """Keeps at most one vote per (comment, user) and reports tally deltas.

    Changes are staged on the session; the caller owns the commit.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def _get(self, comment_id: int, username: str) -> CommentVote | None:
        return self.session.execute(
            select(CommentVote).where(
                CommentVote.comment_id == comment_id,
                CommentVote.username == username,
            )
        ).scalar_one_or_none()

    def direction_for(self, comment_id: int, username: str) -> int:
        """Return the user's current direction, or 0 when they have not voted."""
        vote = self._get(comment_id, username)
        return 0 if vote is None else vote.direction

    def record_or_update(self, comment_id: int, username: str, direction: int) -> int:
        """Record a vote and return how much the comment's tally must change.

        A first vote moves the tally by one, repeating the same direction is a
        no-op, and switching direction moves it by two.
        """
        if direction not in (UPVOTE, DOWNVOTE):
            raise ValueError(f"Invalid vote direction: {direction!r}")

        existing = self._get(comment_id, username)
        if existing is None:
            self.session.add(
                CommentVote(comment_id=comment_id, username=username, direction=direction)
            )
            return direction

        if existing.direction == direction:
            return 0

        existing.direction = direction
        return 2 * direction

    def purge(self, comment_id: int) -> int:
        """Drop every vote recorded against ``comment_id``."""
        result = self.session.execute(
            delete(CommentVote).where(CommentVote.comment_id == comment_id)
        )
        return result.rowcount or 0
