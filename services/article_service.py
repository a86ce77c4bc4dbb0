# services/article_service.py
from typing import List
import logging

from sqlalchemy.orm import Session, joinedload, selectinload

from database.models.auth_models import User, utcnow
from database.models.event_model import Event
from database.models.article_model import Article
from database.models.review_model import ArticleReviewer
from services.audit_service import log_action
from services.errors import ForbiddenError, NotFoundError, ValidationError
from services.event_service import utc_today
from utils.encoding import ensure_pdf
from utils.sanitization import require_text, ARTICLE_NAME_MAX_LENGTH

logger = logging.getLogger(__name__)


def create_article(db: Session, creator_id: int, event_id: int, name: str, description: str, file_bytes: bytes) -> Article:
    """
    Submits a new article against an event that is still open.
    """
    name = require_text(name, "name", ARTICLE_NAME_MAX_LENGTH)
    description = require_text(description, "description")
    file_bytes = ensure_pdf(file_bytes)

    creator = db.query(User).filter(User.id == creator_id).first()
    if creator is None:
        raise NotFoundError(f"User {creator_id} not found")

    event = db.query(Event).filter(Event.id == event_id).first()
    if event is None:
        raise NotFoundError(f"Event {event_id} not found")

    if event.end_date < utc_today():
        raise ValidationError(f"Event {event_id} is closed for submissions")

    now = utcnow()
    article = Article(
        creator_id=creator.id,
        event_id=event.id,
        name=name,
        description=description,
        file=file_bytes,
        created_at=now,
        updated_at=now,
    )
    try:
        db.add(article)
        db.flush()
        log_action(db, creator.id, "SUBMIT_ARTICLE", target_id=article.id, payload={"event_id": event.id})
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Failed to persist article.")
        raise
    db.refresh(article)

    logger.info(f"Article {article.id} submitted by user {creator.id} to event {event.id}")
    return article


def get_article_by_id(db: Session, article_id: int) -> Article:
    """
    Loads an article with its creator, event and every reviewer
    assignment together with the assignment's reviews.
    """
    article = (
        db.query(Article)
        .options(
            joinedload(Article.creator),
            joinedload(Article.event),
            selectinload(Article.article_reviewers).joinedload(ArticleReviewer.reviewer),
            selectinload(Article.article_reviewers).selectinload(ArticleReviewer.reviews),
        )
        .filter(Article.id == article_id)
        .first()
    )
    if article is None:
        raise NotFoundError(f"Article {article_id} not found")
    return article


def list_articles_for_creator(db: Session, creator_id: int) -> List[Article]:
    return (
        db.query(Article)
        .options(joinedload(Article.event))
        .filter(Article.creator_id == creator_id)
        .order_by(Article.id.desc())
        .all()
    )


def update_article_file(db: Session, article_id: int, requester_id: int, file_bytes: bytes) -> Article:
    """
    Replaces the article PDF. Only the creator may do this. Existing
    reviewer assignments and reviews are kept untouched.

    Concurrent updates are last-write-wins.
    """
    article = db.query(Article).filter(Article.id == article_id).first()
    if article is None:
        raise NotFoundError(f"Article {article_id} not found")

    if article.creator_id != requester_id:
        logger.warning(f"User {requester_id} tried to update article {article_id} owned by {article.creator_id}")
        raise ForbiddenError("Only the creator can update this article")

    file_bytes = ensure_pdf(file_bytes)

    try:
        article.file = file_bytes
        article.updated_at = utcnow()
        log_action(db, requester_id, "UPDATE_ARTICLE_FILE", target_id=article.id)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception(f"Failed to update file of article {article_id}.")
        raise
    db.refresh(article)

    logger.info(f"Article {article.id} file replaced by user {requester_id}")
    return article
