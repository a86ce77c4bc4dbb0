import os

# Must be set before the application modules are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("AUTH_SECRET", "test-secret")

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.dependencies.auth import create_access_token
from database.db import Base, engine, SessionLocal
from database.models.auth_models import User
from database.models.event_model import Event
from services.event_service import utc_today
from services.review_service import assign_reviewer

PDF_BYTES = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<< /Type /Catalog >>\nendobj\n%%EOF\n"
REVIEW_PDF_BYTES = b"%PDF-1.7\n% annotated by reviewer\n%%EOF\n"


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    return TestClient(app)


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(name=None, email=None):
        counter["n"] += 1
        user = User(
            name=name or f"User {counter['n']}",
            email=email or f"user{counter['n']}@example.com",
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def make_event(db):
    def _make(name="OPR 2026", end_in_days=30, start_in_days=-10):
        today = utc_today()
        event = Event(
            name=name,
            start_date=today + timedelta(days=start_in_days),
            end_date=today + timedelta(days=end_in_days),
        )
        db.add(event)
        db.commit()
        db.refresh(event)
        return event

    return _make


@pytest.fixture
def make_assignment(db, make_user):
    admin = {}

    def _make(article, reviewer):
        if "user" not in admin:
            admin["user"] = make_user("Event Admin", "admin@example.com")
        return assign_reviewer(db, article.id, reviewer.id, assigned_by=admin["user"].id)

    return _make


def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(user)}"}
