#!/usr/bin/env python3
"""
Script to list all registered volunteers and their approval state
"""
import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv

load_dotenv()

from nss_portal import crud
from nss_portal.core.config import configure_logging
from nss_portal.storage import SQLAlchemyStore


def list_users(database_url: str = None):
    """List all users and their approval state"""
    store = SQLAlchemyStore(database_url)
    users = crud.user.load(store)

    print(f"\nTotal Users: {len(users)}")
    print("=" * 80)

    for user in users:
        print(
            f"Roll: {user.roll_number:<12} | Name: {user.full_name:<30} | "
            f"Status: {user.approval_state.value:<8} | Events: {len(user.event_history)}"
        )

    print("=" * 80)
    return users


if __name__ == "__main__":
    configure_logging()
    list_users(sys.argv[1] if len(sys.argv) > 1 else None)
