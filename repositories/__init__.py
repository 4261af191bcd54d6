"""
SQLAlchemy-based Repositories

This package provides async repository pattern using SQLAlchemy ORM.

Usage:
    from repositories import IssueRepository
    from database import get_session

    async with get_session() as session:
        repo = IssueRepository(session)
        top = await repo.count_resolved_by_solver(limit=3)
"""

from .base import BaseRepository
from .employees import EmployeeRepository
from .issues import IssueRepository
from .comments import CommentRepository
from .lookups import LookupRepository

__all__ = [
    "BaseRepository",
    "EmployeeRepository",
    "IssueRepository",
    "CommentRepository",
    "LookupRepository",
]
