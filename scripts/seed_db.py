# scripts/seed_db.py
"""
Creates demo accounts, an open event and reviewer assignments.

Reviewer assignment has no public endpoint; this script is the
administrative path that creates ArticleReviewer rows.

Usage:
    python scripts/seed_db.py                       # demo users + event
    python scripts/seed_db.py --assign 3 --reviewer 2 --by 1
"""
import argparse
import logging
import os
import sys
from datetime import timedelta

script_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(script_dir, '..')
sys.path.append(os.path.abspath(project_root))

from dotenv import load_dotenv

load_dotenv(os.path.join(project_root, ".env.local"))

from database.db import SessionLocal, init_db
from database.models.auth_models import User
from services.errors import ServiceError
from services.event_service import create_event, utc_today
from services.review_service import assign_reviewer
from services.user_service import register_user

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("seed_db")

DEMO_USERS = [
    ("Ana Author", "author@example.com"),
    ("Rui Reviewer", "reviewer@example.com"),
    ("Bia Reviewer", "reviewer2@example.com"),
]
DEMO_PASSWORD = "opr-demo"


def seed_demo_data(db):
    for name, email in DEMO_USERS:
        if db.query(User).filter(User.email == email).first():
            logger.info(f"User {email} already exists, skipping")
            continue
        register_user(db, name, email, DEMO_PASSWORD)

    today = utc_today()
    event = create_event(db, "OPR Demo Conference", today, today + timedelta(days=30))
    logger.info(f"Open event id={event.id}")


def main():
    parser = argparse.ArgumentParser(description="Seed the OPR database")
    parser.add_argument("--assign", type=int, metavar="ARTICLE_ID", help="article to assign a reviewer to")
    parser.add_argument("--reviewer", type=int, metavar="USER_ID", help="reviewer user id")
    parser.add_argument("--by", type=int, metavar="USER_ID", help="administrator recorded as making the assignment")
    args = parser.parse_args()

    init_db()
    with SessionLocal() as db:
        try:
            if args.assign is not None:
                if args.reviewer is None or args.by is None:
                    parser.error("--reviewer and --by are required with --assign")
                assignment = assign_reviewer(db, args.assign, args.reviewer, assigned_by=args.by)
                print(f"Assignment {assignment.id}: user {args.reviewer} reviews article {args.assign}")
            else:
                seed_demo_data(db)
                print("Demo data created.")
        except ServiceError as e:
            print(f"Error: {e.message}")
            sys.exit(1)


if __name__ == "__main__":
    main()
