"""
Database Module - Factory Issue Dashboard

This module provides database access for the issue tracker.

Structure:
    database/
    ├── __init__.py      # This file - public API
    ├── session.py       # SQLAlchemy async session management
    ├── init.py          # Alembic migration runner
    └── models/          # SQLAlchemy ORM models
        ├── __init__.py
        ├── base.py
        ├── organization.py
        └── issues.py

Usage:
    from database import get_session
    from database.models import Issue

    async with get_session() as session:
        result = await session.execute(select(Issue))
        issues = result.scalars().all()
"""

# SQLAlchemy Models
from .models import (
    Base,
    TimestampMixin,
    LabelMixin,
    Department,
    Employee,
    Priority,
    Status,
    Category,
    Issue,
    IssueComment,
)

# Session Management
from .session import (
    init_engine,
    close_engine,
    get_session,
    get_session_dependency,
    get_database_url,
)

# Migrations
from .init import run_migrations

__all__ = [
    # SQLAlchemy Models
    "Base",
    "TimestampMixin",
    "LabelMixin",
    "Department",
    "Employee",
    "Priority",
    "Status",
    "Category",
    "Issue",
    "IssueComment",
    # Session Management
    "init_engine",
    "close_engine",
    "get_session",
    "get_session_dependency",
    "get_database_url",
    # Migrations
    "run_migrations",
]
