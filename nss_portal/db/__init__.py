from .database import Base, make_engine, make_session_factory, init_db

__all__ = ["Base", "make_engine", "make_session_factory", "init_db"]
