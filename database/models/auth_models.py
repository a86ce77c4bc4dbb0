from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from database.db import Base
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    # Seeded reviewer/organizer accounts may not have a password yet
    password_hash = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    articles = relationship("Article", back_populates="creator")
    review_assignments = relationship("ArticleReviewer", back_populates="reviewer")


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    action = Column(String(64), nullable=False)  # e.g. "SUBMIT_ARTICLE", "SUBMIT_REVIEW"
    target_id = Column(String(64), nullable=True)  # e.g. article id or assignment id
    payload = Column(Text, nullable=True)  # JSON string of details
    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    user = relationship("User")
