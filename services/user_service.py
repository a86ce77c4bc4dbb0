# services/user_service.py
from typing import Optional
import hashlib
import logging

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database.models.auth_models import User
from services.errors import ValidationError
from utils.sanitization import require_text, NAME_MAX_LENGTH, EMAIL_MAX_LENGTH

logger = logging.getLogger(__name__)

# bcrypt only accepts up to 72 bytes of password input
PASSWORD_MAX_BYTES = 72


def _get_email_hash(email: str) -> str:
    """Returns SHA-256 hash of the email for secure logging."""
    return hashlib.sha256(email.lower().strip().encode("utf-8")).hexdigest()


def _password_bytes(password: str) -> bytes:
    encoded = password.encode("utf-8")
    if len(encoded) > PASSWORD_MAX_BYTES:
        raise ValidationError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
    return encoded


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def register_user(db: Session, name: str, email: str, password: Optional[str]) -> User:
    name = require_text(name, "name", NAME_MAX_LENGTH)
    email = require_text(email, "email", EMAIL_MAX_LENGTH).lower()

    if db.query(User).filter(User.email == email).first():
        raise ValidationError("Email is already used")

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password) if password else None,
    )
    try:
        db.add(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError("Email is already used")
    db.refresh(user)

    logger.info(f"Registered user {user.id} ({_get_email_hash(email)})")
    return user


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Returns the user when the credentials match, otherwise None."""
    email = (email or "").lower().strip()
    user = db.query(User).filter(User.email == email).first()
    if user is None or not user.password_hash:
        logger.info(f"Login rejected for unknown account: {_get_email_hash(email)}")
        return None

    try:
        password_bytes = _password_bytes(password)
    except ValidationError:
        logger.warning(f"Login rejected, oversized password for user {user.id}")
        return None

    if not bcrypt.checkpw(password_bytes, user.password_hash.encode("utf-8")):
        logger.warning(f"Login rejected, wrong password for user {user.id}")
        return None

    return user
