#!/usr/bin/env python3
"""
Create the storage table for DATABASE_URL using SQLAlchemy
"""
import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv
from sqlalchemy.exc import SQLAlchemyError

load_dotenv()

from nss_portal.core.config import configure_logging, settings
from nss_portal.db.database import init_db, make_engine


def create_tables(database_url: str = None):
    """Create all database tables"""
    try:
        url = database_url or settings.DATABASE_URL
        print(f"Creating storage table on {url}...")

        init_db(make_engine(url))

        print("Tables created successfully!")
        return True

    except SQLAlchemyError as e:
        print(f"Error creating tables: {e}")
        return False


if __name__ == "__main__":
    configure_logging()
    success = create_tables(sys.argv[1] if len(sys.argv) > 1 else None)
    sys.exit(0 if success else 1)
