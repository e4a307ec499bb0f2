# File: nss_portal/db/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from nss_portal.core.config import settings

Base = declarative_base()


def make_engine(database_url: str = None):
    url = database_url or settings.DATABASE_URL
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # a single shared connection, otherwise every session sees an empty database
            return create_engine(url, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(url, connect_args=connect_args)
    return create_engine(url, pool_pre_ping=True)


def make_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine) -> None:
    # Register models on Base.metadata before creating tables
    from nss_portal.models import storage_entry  # noqa: F401

    Base.metadata.create_all(bind=engine)
