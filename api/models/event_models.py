# api/models/event_models.py
from datetime import date

from api.models.base import CamelModel


class EventRead(CamelModel):
    id: int
    name: str
    start_date: date
    end_date: date
