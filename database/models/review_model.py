# database/models/review_model.py
from sqlalchemy import Column, Integer, Text, LargeBinary, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.db import Base
from database.models.auth_models import utcnow


class ArticleReviewer(Base):
    """
    Assignment of one reviewer to one article. Anchors the reviewer's
    append-only history of Reviews for that article.
    """
    __tablename__ = "article_reviewers"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    article_id = Column(Integer, ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True)
    reviewer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    article = relationship("Article", back_populates="article_reviewers")
    reviewer = relationship("User", back_populates="review_assignments")
    reviews = relationship(
        "Review",
        back_populates="article_reviewer",
        cascade="all, delete-orphan",
        order_by="Review.id.desc()",
    )

    __table_args__ = (
        UniqueConstraint("article_id", "reviewer_id", name="uq_article_reviewer"),
    )


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    article_reviewer_id = Column(
        Integer, ForeignKey("article_reviewers.id", ondelete="CASCADE"), nullable=False, index=True
    )

    comments = Column(Text, nullable=False, default="")
    file = Column(LargeBinary, nullable=False)  # reviewer's annotated PDF
    original_file = Column(LargeBinary, nullable=True)  # article PDF as it was when reviewed

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    article_reviewer = relationship("ArticleReviewer", back_populates="reviews")
