#!/usr/bin/env python3
"""Seed demo users.

Creates a couple of demo accounts so the API can be tried out right away.
Existing demo accounts are deleted and re-created.

Usage:
    AUTH_SECRET=... DATABASE_URL=sqlite:///./app.db python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.database import SessionLocal, init_db
from src.services.auth import register_user
from src.services.user_directory import UserDirectory

# Demo user credentials
DEMO_USERS = [
    ("alice", "alice@example.com", "demopass123"),
    ("bob", "bob@example.com", "demopass123"),
]


def seed_demo_data():
    """Seed the database with demo users."""
    init_db()
    session = SessionLocal()

    try:
        directory = UserDirectory(session)
        for username, email, password in DEMO_USERS:
            existing_user = directory.find_by_email(email)
            if existing_user:
                print(f"Re-creating {email}")
                directory.delete_by_id(existing_user.id)
            user = register_user(directory, username, email, password)
            print(f"Created user {user.id}: {email} / {password}")
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
