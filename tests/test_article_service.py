import pytest

from database.models.auth_models import AuditLog
from services.article_service import (
    create_article,
    get_article_by_id,
    list_articles_for_creator,
    update_article_file,
)
from services.errors import ForbiddenError, NotFoundError, ValidationError
from services.review_service import submit_review
from utils.encoding import decode_file, encode_file
from conftest import PDF_BYTES, REVIEW_PDF_BYTES


def test_create_then_get_round_trips_fields(db, make_user, make_event):
    creator = make_user("Ana")
    event = make_event()
    # Bytes arrive as base64 over the wire
    file_bytes = decode_file("data:application/pdf;base64," + encode_file(PDF_BYTES))

    created = create_article(db, creator.id, event.id, "Paper A", "About things", file_bytes)
    article = get_article_by_id(db, created.id)

    assert article.creator.id == creator.id
    assert article.event.id == event.id
    assert article.name == "Paper A"
    assert article.description == "About things"
    assert decode_file(encode_file(article.file)) == PDF_BYTES
    assert article.article_reviewers == []
    assert article.created_at is not None
    assert article.updated_at is not None


@pytest.mark.parametrize("name,description", [("", "desc"), ("Paper", "   "), (None, "desc")])
def test_create_requires_name_and_description(db, make_user, make_event, name, description):
    creator = make_user()
    event = make_event()
    with pytest.raises(ValidationError):
        create_article(db, creator.id, event.id, name, description, PDF_BYTES)


def test_create_rejects_non_pdf(db, make_user, make_event):
    creator = make_user()
    event = make_event()
    with pytest.raises(ValidationError):
        create_article(db, creator.id, event.id, "Paper", "desc", b"plain text")


def test_create_unknown_references(db, make_user, make_event):
    creator = make_user()
    event = make_event()
    with pytest.raises(NotFoundError):
        create_article(db, creator.id, event.id + 100, "Paper", "desc", PDF_BYTES)
    with pytest.raises(NotFoundError):
        create_article(db, creator.id + 100, event.id, "Paper", "desc", PDF_BYTES)


def test_create_rejects_closed_event(db, make_user, make_event):
    creator = make_user()
    closed = make_event(end_in_days=-1)
    with pytest.raises(ValidationError, match="closed"):
        create_article(db, creator.id, closed.id, "Paper", "desc", PDF_BYTES)


def test_create_accepts_event_ending_today(db, make_user, make_event):
    creator = make_user()
    event = make_event(end_in_days=0)
    article = create_article(db, creator.id, event.id, "Paper", "desc", PDF_BYTES)
    assert article.id is not None


def test_get_missing_article(db):
    with pytest.raises(NotFoundError):
        get_article_by_id(db, 999)


def test_get_is_idempotent(db, make_user, make_event):
    creator = make_user()
    article = create_article(db, creator.id, make_event().id, "Paper", "desc", PDF_BYTES)

    first = get_article_by_id(db, article.id)
    snapshot = (first.id, first.name, first.file, first.updated_at, len(first.article_reviewers))
    second = get_article_by_id(db, article.id)

    assert snapshot == (second.id, second.name, second.file, second.updated_at, len(second.article_reviewers))


def test_update_by_creator_replaces_file(db, make_user, make_event):
    creator = make_user()
    article = create_article(db, creator.id, make_event().id, "Paper", "desc", PDF_BYTES)
    created_at = article.created_at
    previous_update = article.updated_at

    updated = update_article_file(db, article.id, creator.id, REVIEW_PDF_BYTES)

    assert updated.file == REVIEW_PDF_BYTES
    assert updated.created_at == created_at
    assert updated.updated_at >= previous_update
    assert updated.name == "Paper"


def test_update_by_other_user_is_forbidden(db, make_user, make_event):
    creator = make_user()
    intruder = make_user()
    article = create_article(db, creator.id, make_event().id, "Paper", "desc", PDF_BYTES)

    with pytest.raises(ForbiddenError):
        update_article_file(db, article.id, intruder.id, REVIEW_PDF_BYTES)

    db.expire_all()
    assert get_article_by_id(db, article.id).file == PDF_BYTES


def test_update_missing_article(db, make_user):
    with pytest.raises(NotFoundError):
        update_article_file(db, 42, make_user().id, PDF_BYTES)


def test_update_keeps_existing_reviews(db, make_user, make_event, make_assignment):
    creator = make_user()
    reviewer = make_user()
    article = create_article(db, creator.id, make_event().id, "Paper", "desc", PDF_BYTES)
    assignment = make_assignment(article, reviewer)
    submit_review(db, assignment.id, reviewer.id, "Needs revision", REVIEW_PDF_BYTES)

    update_article_file(db, article.id, creator.id, b"%PDF-1.5 revised")

    db.expire_all()
    refreshed = get_article_by_id(db, article.id)
    assert len(refreshed.article_reviewers) == 1
    assert len(refreshed.article_reviewers[0].reviews) == 1


def test_list_articles_for_creator(db, make_user, make_event):
    creator = make_user()
    other = make_user()
    event = make_event()
    first = create_article(db, creator.id, event.id, "First", "desc", PDF_BYTES)
    second = create_article(db, creator.id, event.id, "Second", "desc", PDF_BYTES)
    create_article(db, other.id, event.id, "Not mine", "desc", PDF_BYTES)

    articles = list_articles_for_creator(db, creator.id)
    assert [a.id for a in articles] == [second.id, first.id]


def test_mutations_are_audited(db, make_user, make_event):
    creator = make_user()
    article = create_article(db, creator.id, make_event().id, "Paper", "desc", PDF_BYTES)
    update_article_file(db, article.id, creator.id, PDF_BYTES)

    actions = [row.action for row in db.query(AuditLog).order_by(AuditLog.id).all()]
    assert actions == ["SUBMIT_ARTICLE", "UPDATE_ARTICLE_FILE"]


def test_create_rejects_name_longer_than_column(db, make_user, make_event):
    creator = make_user()
    event = make_event()

    with pytest.raises(ValidationError, match="at most 512"):
        create_article(db, creator.id, event.id, "x" * 513, "desc", PDF_BYTES)

    article = create_article(db, creator.id, event.id, "x" * 512, "desc", PDF_BYTES)
    assert len(article.name) == 512
