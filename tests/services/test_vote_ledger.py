"""Tests for the per-user comment vote ledger."""

import pytest

from agora_forum.models import CommentVote
from agora_forum.services.vote_ledger import (
    DOWNVOTE,
    UPVOTE,
    VoteLedger,
    direction_from_flag,
)


def test_direction_from_flag() -> None:
    assert direction_from_flag(True) == UPVOTE
    assert direction_from_flag(False) == DOWNVOTE


def test_first_vote_moves_tally_by_one(db_session, alice_comment) -> None:
    ledger = VoteLedger(db_session)

    assert ledger.record_or_update(alice_comment.id, "bob", UPVOTE) == 1
    db_session.flush()
    assert ledger.direction_for(alice_comment.id, "bob") == UPVOTE


def test_repeat_vote_is_noop(db_session, alice_comment) -> None:
    ledger = VoteLedger(db_session)
    ledger.record_or_update(alice_comment.id, "bob", DOWNVOTE)
    db_session.flush()

    assert ledger.record_or_update(alice_comment.id, "bob", DOWNVOTE) == 0
    assert ledger.direction_for(alice_comment.id, "bob") == DOWNVOTE


def test_flipping_vote_moves_tally_by_two(db_session, alice_comment) -> None:
    ledger = VoteLedger(db_session)
    ledger.record_or_update(alice_comment.id, "bob", UPVOTE)
    db_session.flush()

    assert ledger.record_or_update(alice_comment.id, "bob", DOWNVOTE) == -2
    db_session.flush()
    assert ledger.record_or_update(alice_comment.id, "bob", UPVOTE) == 2


def test_invalid_direction_rejected(db_session, alice_comment) -> None:
    ledger = VoteLedger(db_session)
    with pytest.raises(ValueError):
        ledger.record_or_update(alice_comment.id, "bob", 0)


def test_purge_removes_every_vote_for_comment(db_session, alice_comment) -> None:
    ledger = VoteLedger(db_session)
    ledger.record_or_update(alice_comment.id, "bob", UPVOTE)
    ledger.record_or_update(alice_comment.id, "carol", DOWNVOTE)
    db_session.flush()

    assert ledger.purge(alice_comment.id) == 2
    assert db_session.query(CommentVote).count() == 0
    assert ledger.direction_for(alice_comment.id, "bob") == 0
