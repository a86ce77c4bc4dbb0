# database/models/event_model.py
from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from database.db import Base


class Event(Base):
    """
    A call-for-papers window. Articles may only be submitted while
    end_date has not passed.
    """
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False, index=True)

    articles = relationship("Article", back_populates="event")
