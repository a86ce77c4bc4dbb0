# database/models/article_model.py
from sqlalchemy import Column, Integer, String, Text, LargeBinary, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base
from database.models.auth_models import utcnow


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)

    name = Column(String(512), nullable=False)
    description = Column(Text, nullable=False)

    # Raw PDF bytes; the API exchanges them as base64 text
    file = Column(LargeBinary, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    creator = relationship("User", back_populates="articles")
    event = relationship("Event", back_populates="articles")
    article_reviewers = relationship(
        "ArticleReviewer",
        back_populates="article",
        cascade="all, delete-orphan",
        order_by="ArticleReviewer.id",
    )
