# File: api/routers/event.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies.auth import get_current_user, get_db
from api.models.event_models import EventRead
from database.models.auth_models import User
from services.event_service import list_upcoming_events

router = APIRouter()


@router.get("/event", response_model=List[EventRead])
def get_upcoming_events(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Events still accepting submissions (endDate today or later)."""
    return list_upcoming_events(db)
