from sqlalchemy.orm import Session
from database.models.auth_models import AuditLog
import json
from typing import Optional


def log_action(db: Session, user_id: int, action: str, target_id=None, payload: Optional[dict] = None) -> AuditLog:
    """
    Adds an immutable audit log entry to the caller's transaction.
    The caller is responsible for committing.
    """
    log_entry = AuditLog(
        user_id=user_id,
        action=action,
        target_id=str(target_id) if target_id is not None else None,
        payload=json.dumps(payload, default=str) if payload else None,
    )
    db.add(log_entry)
    return log_entry
