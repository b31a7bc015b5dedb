"""Tests for review/question models and their wire shapes."""

from reviewdesk.content.models import Answer, Comment, Question, Review


def test_review_to_dict_omits_empty_thread():
    review = Review(product_id="P1", user_id="U1", rating=5, comment="great")
    assert review.to_dict() == {
        "product_id": "P1",
        "user_id": "U1",
        "rating": 5,
        "comment": "great",
        "flagged": False,
        "moderated": False,
    }


def test_review_to_dict_with_comments():
    review = Review(
        product_id="P1",
        user_id="U1",
        rating=3,
        comment="meh",
        comments=[Comment(user_id="U2", text="agreed", timestamp=100)],
    )
    data = review.to_dict()
    assert list(data) == [
        "product_id", "user_id", "rating", "comment", "comments", "flagged", "moderated",
    ]
    assert data["comments"] == [
        {"user_id": "U2", "text": "agreed", "timestamp": 100, "flagged": False, "moderated": False}
    ]


def test_review_defaults():
    review = Review(product_id="P9", user_id="U9")
    assert review.rating == 0
    assert review.comment == ""
    assert review.comments == []
    assert not review.flagged and not review.moderated


def test_question_to_dict_with_answers():
    question = Question(
        product_id="P1",
        user_id="U1",
        seller_id="S1",
        query="Does it fit?",
        timestamp=42,
        answers=[Answer(seller_id="S1", response="Yes", timestamp=43)],
        flagged=True,
    )
    data = question.to_dict()
    assert data["answers"] == [
        {"seller_id": "S1", "response": "Yes", "timestamp": 43, "flagged": False, "moderated": False}
    ]
    assert data["flagged"] is True


def test_question_to_dict_shape():
    data = Question(product_id="P1", user_id="U1", seller_id="S1", query="q", timestamp=7).to_dict()
    assert data == {
        "product_id": "P1",
        "user_id": "U1",
        "seller_id": "S1",
        "query": "q",
        "timestamp": 7,
        "flagged": False,
        "moderated": False,
    }


def test_primary_text_and_responses():
    review = Review(product_id="P1", user_id="U1", comment="body")
    question = Question(product_id="P1", user_id="U1", query="ask")
    assert review.primary_text == "body"
    assert question.primary_text == "ask"
    assert review.responses is review.comments
    assert question.responses is question.answers


def test_question_thread_match_requires_all_fields():
    question = Question(product_id="P1", user_id="U1", seller_id="S1", query="q")
    assert question.matches_thread("P1", "U1", "q", "S1")
    assert not question.matches_thread("P1", "U1", "q", "S2")
    assert not question.matches_thread("P1", "U2", "q", "S1")
    assert not question.matches_thread("P1", "U1", "Q", "S1")
