import sys
import os

# Add the project root to the python path so we can import from database
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from sqlalchemy import text, inspect
from dotenv import load_dotenv

# Load environment variables from .env.local (or .env)
env_path = os.path.join(os.path.dirname(__file__), '..', '.env.local')
if not os.path.exists(env_path):
    env_path = os.path.join(os.path.dirname(__file__), '..', '.env')
load_dotenv(env_path)

from database.db import engine

TABLES = [
    "audit_logs",
    "reviews",
    "article_reviewers",
    "articles",
    "events",
    "users",
]


def reset_database():
    """
    Truncates all tables in the database to clear all data while preserving structure.
    """
    print("WARNING: This will delete ALL data from the following tables:")
    for t in TABLES:
        print(f" - {t}")

    print("\nThe schema (structure) will be preserved.")

    confirm = input("Are you sure you want to proceed? (yes/no): ")
    if confirm.lower() != "yes":
        print("Operation cancelled.")
        return

    existing_tables = set(inspect(engine).get_table_names())
    missing_tables = [t for t in TABLES if t not in existing_tables]
    if missing_tables:
        print(f"Error: The following tables were not found in the database: {missing_tables}")
        return

    with engine.begin() as connection:
        preparer = engine.dialect.identifier_preparer
        table_list_str = ", ".join(preparer.quote(t) for t in TABLES)

        print(f"Truncating tables: {table_list_str}...")
        connection.execute(text(f"TRUNCATE TABLE {table_list_str} RESTART IDENTITY CASCADE;"))

    print("Successfully reset all tables.")


if __name__ == "__main__":
    reset_database()
