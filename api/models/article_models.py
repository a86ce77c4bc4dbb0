# api/models/article_models.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from api.models.base import CamelModel
from api.models.event_models import EventRead
from api.models.user_models import UserRead
from utils.encoding import encode_file


class Base64FileModel(CamelModel):
    """Serializes binary file columns as base64 text."""

    @field_validator("file", "original_file", mode="before", check_fields=False)
    @classmethod
    def _encode_bytes(cls, value):
        if isinstance(value, (bytes, bytearray, memoryview)):
            return encode_file(bytes(value))
        return value


# --- Requests ---

class ArticleCreate(CamelModel):
    name: str
    description: str
    file: str = Field(..., description="Base64 PDF, data URL prefix optional")
    event: int = Field(..., description="Event id")


class ArticleFileUpdate(CamelModel):
    file: str = Field(..., description="Base64 PDF, data URL prefix optional")


class ReviewCreate(CamelModel):
    article_reviewer: int = Field(..., description="ArticleReviewer id")
    comments: str = ""
    file: str
    original_file: Optional[str] = None


# --- Responses ---

class ReviewRead(Base64FileModel):
    id: int
    comments: str
    file: str
    original_file: Optional[str] = None
    created_at: datetime


class ArticleReviewerRead(CamelModel):
    id: int
    created_at: datetime
    updated_at: datetime
    reviewer: UserRead
    reviews: List[ReviewRead] = Field(default_factory=list, alias="articleReview")


class ArticleSummary(CamelModel):
    id: int
    name: str
    description: str
    created_at: datetime
    updated_at: datetime
    event: EventRead


class ArticleDetail(Base64FileModel):
    id: int
    name: str
    description: str
    file: str
    created_at: datetime
    updated_at: datetime
    creator: UserRead
    event: EventRead
    article_reviewers: List[ArticleReviewerRead] = Field(default_factory=list, alias="articleReviewer")


class ReviewerAssignmentRead(CamelModel):
    id: int
    created_at: datetime
    updated_at: datetime
    article: ArticleSummary
    reviews: List[ReviewRead] = Field(default_factory=list, alias="articleReview")


class ReviewerReviewRead(Base64FileModel):
    """A review flattened out of its assignment and labelled with the reviewer."""
    id: int
    reviewer_name: str
    comments: str
    file: str
    original_file: Optional[str] = None
    created_at: datetime
