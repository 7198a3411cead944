"""Database engine, session factory and lifecycle."""

from .config import (
    build_engine,
    check_database,
    close_database,
    get_engine,
    get_session_factory,
    init_database,
)

__all__ = [
    "build_engine",
    "check_database",
    "close_database",
    "get_engine",
    "get_session_factory",
    "init_database",
]
