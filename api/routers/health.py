# File: api/routers/health.py
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from api.dependencies.auth import get_db


router = APIRouter()


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    # OperationalError propagates to the TransientError handler (503)
    db.execute(text("SELECT 1"))
    return {"status": "ok"}
