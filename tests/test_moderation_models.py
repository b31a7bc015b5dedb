"""Tests for moderation actions and the item lifecycle."""

from reviewdesk.content.models import Question, Review
from reviewdesk.moderation.models import ModerationAction, ModerationState


def test_parse_known_actions():
    assert ModerationAction.parse("approve") is ModerationAction.approve
    assert ModerationAction.parse("remove") is ModerationAction.remove
    assert ModerationAction.parse(ModerationAction.remove) is ModerationAction.remove


def test_parse_unknown_action_is_none():
    assert ModerationAction.parse("delete") is None
    assert ModerationAction.parse("APPROVE") is None
    assert ModerationAction.parse("") is None
    assert ModerationAction.parse(None) is None


def test_new_item_is_clean():
    review = Review(product_id="P1", user_id="U1", rating=4, comment="ok")
    assert review.state == ModerationState.clean
    assert not review.awaiting_moderation


def test_flag_then_approve():
    question = Question(product_id="P1", user_id="U1", query="size?")
    assert question.flag() is True
    assert question.state == ModerationState.flagged
    assert question.awaiting_moderation

    assert question.approve() is True
    assert question.state == ModerationState.approved
    assert not question.awaiting_moderation


def test_flag_and_approve_are_idempotent():
    review = Review(product_id="P1", user_id="U1")
    review.flag()
    assert review.flag() is False
    review.approve()
    assert review.approve() is False
    assert review.flagged and review.moderated


def test_approved_item_never_returns_to_queue():
    review = Review(product_id="P1", user_id="U1")
    review.flag()
    review.approve()
    review.flag()
    assert review.state == ModerationState.approved
    assert not review.awaiting_moderation


def test_missing_item_is_removed():
    assert ModerationState.of(None) == ModerationState.removed
