# File: api/routers/article.py
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies.auth import get_current_user, get_db
from api.models.article_models import (
    ArticleCreate,
    ArticleDetail,
    ArticleFileUpdate,
    ArticleSummary,
    ReviewerAssignmentRead,
    ReviewerReviewRead,
)
from database.models.auth_models import User
from services.article_service import (
    create_article,
    get_article_by_id,
    list_articles_for_creator,
    update_article_file,
)
from services.review_service import list_reviews_for_article, list_reviews_for_reviewer
from utils.encoding import decode_file

router = APIRouter()


@router.get("/article", response_model=List[ArticleSummary])
def get_my_articles(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return list_articles_for_creator(db, current_user.id)


@router.post("/article", response_model=ArticleDetail, status_code=status.HTTP_201_CREATED)
def post_article(payload: ArticleCreate, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    article = create_article(
        db,
        creator_id=current_user.id,
        event_id=payload.event,
        name=payload.name,
        description=payload.description,
        file_bytes=decode_file(payload.file),
    )
    return get_article_by_id(db, article.id)


@router.get("/article/reviewer/{user_id}", response_model=List[ReviewerAssignmentRead])
def get_reviewer_assignments(user_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return list_reviews_for_reviewer(db, user_id, current_user.id)


@router.get("/article/{article_id}", response_model=ArticleDetail)
def get_article(article_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return get_article_by_id(db, article_id)


@router.put("/article/{article_id}", response_model=ArticleDetail)
def put_article(
    article_id: int,
    payload: ArticleFileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    update_article_file(db, article_id, current_user.id, decode_file(payload.file))
    return get_article_by_id(db, article_id)


@router.get("/article/{article_id}/reviews", response_model=List[ReviewerReviewRead])
def get_article_reviews(article_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return list_reviews_for_article(db, article_id)
