"""
Database module for the staffdesk backend
"""

from .connection import (
    SessionFactory,
    create_engine,
    create_schema,
    create_session_factory,
    session_scope,
)

__all__ = [
    "SessionFactory",
    "create_engine",
    "create_schema",
    "create_session_factory",
    "session_scope",
]
