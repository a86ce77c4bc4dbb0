# services/review_service.py
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from database.models.auth_models import User
from database.models.article_model import Article
from database.models.review_model import ArticleReviewer, Review
from services.audit_service import log_action
from services.errors import ForbiddenError, NotFoundError, ValidationError
from utils.encoding import ensure_pdf

logger = logging.getLogger(__name__)


def list_reviews_for_reviewer(db: Session, reviewer_id: int, requester_id: int) -> List[ArticleReviewer]:
    """Assignments of a reviewer, most recent first, with article summary and reviews."""
    if requester_id != reviewer_id:
        logger.warning(f"User {requester_id} tried to list the assignments of reviewer {reviewer_id}")
        raise ForbiddenError("Reviewers can only list their own assignments")

    return (
        db.query(ArticleReviewer)
        .options(
            joinedload(ArticleReviewer.article).joinedload(Article.event),
            selectinload(ArticleReviewer.reviews),
        )
        .filter(ArticleReviewer.reviewer_id == reviewer_id)
        .order_by(ArticleReviewer.id.desc())
        .all()
    )


def submit_review(
    db: Session,
    article_reviewer_id: int,
    reviewer_id: int,
    comments: Optional[str],
    file_bytes: bytes,
    original_file_bytes: Optional[bytes] = None,
) -> Review:
    assignment = db.query(ArticleReviewer).filter(ArticleReviewer.id == article_reviewer_id).first()
    if assignment is None:
        raise NotFoundError(f"Reviewer assignment {article_reviewer_id} not found")

    if assignment.reviewer_id != reviewer_id:
        logger.warning(
            f"User {reviewer_id} tried to review through assignment {article_reviewer_id} "
            f"of reviewer {assignment.reviewer_id}"
        )
        raise ForbiddenError("Only the assigned reviewer can submit this review")

    file_bytes = ensure_pdf(file_bytes)
    if original_file_bytes is not None:
        original_file_bytes = ensure_pdf(original_file_bytes, "originalFile")

    review = Review(
        article_reviewer_id=assignment.id,
        comments=(comments or "").strip(),
        file=file_bytes,
        original_file=original_file_bytes,
    )
    try:
        db.add(review)
        db.flush()
        log_action(
            db, reviewer_id, "SUBMIT_REVIEW",
            target_id=review.id,
            payload={"article_id": assignment.article_id, "article_reviewer_id": assignment.id},
        )
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Failed to persist review.")
        raise
    db.refresh(review)

    logger.info(f"Review {review.id} submitted on article {assignment.article_id} by reviewer {reviewer_id}")
    return review


def list_reviews_for_article(db: Session, article_id: int) -> List[Dict[str, Any]]:
    """
    Flattens every assignment's reviews into a single list labelled with
    the reviewer's name, newest review first.
    """
    article = (
        db.query(Article)
        .options(
            selectinload(Article.article_reviewers).joinedload(ArticleReviewer.reviewer),
            selectinload(Article.article_reviewers).selectinload(ArticleReviewer.reviews),
        )
        .filter(Article.id == article_id)
        .first()
    )
    if article is None:
        raise NotFoundError(f"Article {article_id} not found")

    flat = []
    for assignment in article.article_reviewers:
        reviewer_name = assignment.reviewer.name
        for review in assignment.reviews:
            flat.append({
                "id": review.id,
                "reviewer_name": reviewer_name,
                "comments": review.comments,
                "file": review.file,
                "original_file": review.original_file,
                "created_at": review.created_at,
            })

    flat.sort(key=lambda r: r["id"], reverse=True)
    return flat


def assign_reviewer(db: Session, article_id: int, reviewer_id: int, assigned_by: int) -> ArticleReviewer:
    """
    Administrative path: assigns a reviewer to an article. Not exposed
    over HTTP. assigned_by is the administrator recorded as the actor.
    """
    administrator = db.query(User).filter(User.id == assigned_by).first()
    if administrator is None:
        raise NotFoundError(f"User {assigned_by} not found")

    article = db.query(Article).filter(Article.id == article_id).first()
    if article is None:
        raise NotFoundError(f"Article {article_id} not found")

    reviewer = db.query(User).filter(User.id == reviewer_id).first()
    if reviewer is None:
        raise NotFoundError(f"User {reviewer_id} not found")

    if article.creator_id == reviewer.id:
        raise ValidationError("The creator of an article cannot review it")

    existing = (
        db.query(ArticleReviewer)
        .filter(ArticleReviewer.article_id == article.id, ArticleReviewer.reviewer_id == reviewer.id)
        .first()
    )
    if existing is not None:
        raise ValidationError(f"User {reviewer_id} is already assigned to article {article_id}")

    assignment = ArticleReviewer(article_id=article.id, reviewer_id=reviewer.id)
    try:
        db.add(assignment)
        db.flush()
        log_action(
            db, administrator.id, "ASSIGN_REVIEWER",
            target_id=assignment.id,
            payload={"article_id": article.id, "reviewer_id": reviewer.id},
        )
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError(f"User {reviewer_id} is already assigned to article {article_id}")
    except Exception:
        db.rollback()
        logger.exception("Failed to assign reviewer.")
        raise
    db.refresh(assignment)

    logger.info(f"User {reviewer.id} assigned to review article {article.id} by user {administrator.id}")
    return assignment
