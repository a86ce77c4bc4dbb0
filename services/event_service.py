# services/event_service.py
from datetime import date, datetime, timezone
from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from database.models.event_model import Event
from services.errors import NotFoundError, ValidationError
from utils.sanitization import require_text, NAME_MAX_LENGTH

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def list_upcoming_events(db: Session, today: Optional[date] = None) -> List[Event]:
    """Events still open for submissions. An event ending today is included."""
    today = today or utc_today()
    return (
        db.query(Event)
        .filter(Event.end_date >= today)
        .order_by(Event.start_date, Event.id)
        .all()
    )


def get_event(db: Session, event_id: int) -> Event:
    event = db.query(Event).filter(Event.id == event_id).first()
    if event is None:
        raise NotFoundError(f"Event {event_id} not found")
    return event


def create_event(db: Session, name: str, start_date: date, end_date: date) -> Event:
    name = require_text(name, "name", NAME_MAX_LENGTH)
    if end_date < start_date:
        raise ValidationError("endDate must not be before startDate")

    event = Event(name=name, start_date=start_date, end_date=end_date)
    try:
        db.add(event)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Failed to create event.")
        raise
    db.refresh(event)

    logger.info(f"Created event {event.id} ({start_date} - {end_date})")
    return event
