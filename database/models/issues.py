"""
Issue Models

Issues, their lookup tables (priority, status, category) and comments.
"""
from datetime import datetime, date
from typing import Optional, List

from sqlalchemy import String, Integer, Text, Date, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, LabelMixin


class Priority(Base, LabelMixin):
    """Priority tier. Ids 1-4 run from critical to low."""
    __tablename__ = "priorities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)


class Status(Base, LabelMixin):
    """Issue status. Id 3 is resolved, 4 verified, 5 closed."""
    __tablename__ = "statuses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)


class Category(Base, LabelMixin):
    """Issue category (machine failure, quality, safety, ...)."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)


class Issue(Base, TimestampMixin):
    """
    A reported factory issue.

    `assignee_id` is the employee who found and reported the issue,
    `solver_id` the one assigned to resolve it. `updated_at` doubles as the
    resolution time once the status reaches resolved.
    """
    __tablename__ = "issues"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Lookups
    priority_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("priorities.id"), nullable=True
    )
    status_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("statuses.id"), nullable=True
    )
    category_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("categories.id"), nullable=True
    )
    department_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("departments.id"), nullable=True
    )

    # People
    assignee_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="SET NULL"), nullable=True
    )
    solver_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="SET NULL"), nullable=True
    )

    due_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # Relationships
    priority: Mapped[Optional["Priority"]] = relationship("Priority")
    status: Mapped[Optional["Status"]] = relationship("Status")
    category: Mapped[Optional["Category"]] = relationship("Category")
    department: Mapped[Optional["Department"]] = relationship("Department")
    comments: Mapped[List["IssueComment"]] = relationship(
        "IssueComment",
        back_populates="issue",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index('idx_issues_status', 'status_id'),
        Index('idx_issues_solver', 'solver_id', 'status_id'),
        Index('idx_issues_assignee', 'assignee_id'),
        Index('idx_issues_created', 'created_at'),
        Index('idx_issues_updated', 'updated_at'),
    )


class IssueComment(Base):
    """A comment left on an issue."""
    __tablename__ = "issue_comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    issue_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("issues.id", ondelete="CASCADE"),
        nullable=False
    )
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=func.now(),
        nullable=False
    )

    issue: Mapped["Issue"] = relationship("Issue", back_populates="comments")

    __table_args__ = (
        Index('idx_comments_author', 'author_id', 'created_at'),
        Index('idx_comments_issue', 'issue_id'),
    )
