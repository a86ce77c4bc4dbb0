# File: api/routers/review.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies.auth import get_current_user, get_db
from api.models.article_models import ReviewCreate, ReviewRead
from database.models.auth_models import User
from services.review_service import submit_review
from utils.encoding import decode_file

router = APIRouter()


@router.post("/review", response_model=ReviewRead, status_code=status.HTTP_201_CREATED)
def post_review(payload: ReviewCreate, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    original_file = decode_file(payload.original_file, "originalFile") if payload.original_file else None
    return submit_review(
        db,
        article_reviewer_id=payload.article_reviewer,
        reviewer_id=current_user.id,
        comments=payload.comments,
        file_bytes=decode_file(payload.file),
        original_file_bytes=original_file,
    )
