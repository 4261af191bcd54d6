"""
Dashboard - issue statistics for the main dashboard.
"""
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from constants import NO_DEPARTMENT_LABEL
from database.models import Category, Department, Issue, Priority, Status
from repositories import IssueRepository, LookupRepository
from .labels import localized_label


class DashboardService:
    """Builds the dashboard summary in one call."""

    def __init__(self, session: AsyncSession):
        self.issues = IssueRepository(session)
        self.lookups = LookupRepository(session)

    async def summary(self, lang: Optional[str] = None) -> dict:
        """
        Issue totals, counts per status/priority/department/category,
        the latest issues and issues due within a week.
        """
        return {
            "timestamp": datetime.now().isoformat(),
            "total": await self.issues.count(),
            "byStatus": await self._grouped("status_id", Status, lang),
            "byPriority": await self._grouped("priority_id", Priority, lang),
            "byDepartment": await self._grouped("department_id", Department, lang),
            "byCategory": await self._grouped("category_id", Category, lang),
            "recentIssues": [
                self._issue_dict(issue, lang) for issue in await self.issues.get_recent(limit=5)
            ],
            "upcomingDueIssues": [
                self._issue_dict(issue, lang) for issue in await self.issues.get_upcoming_due(days=7, limit=5)
            ],
        }

    async def _grouped(self, column_name: str, model, lang: Optional[str]) -> List[Dict]:
        counts = await self.issues.count_by(column_name)
        rows = await self.lookups.get_map(model)

        grouped = [
            {
                "id": row_id,
                "label": localized_label(row, lang),
                "issueCount": counts.get(row_id, 0),
            }
            for row_id, row in rows.items()
        ]
        unassigned = counts.get(None, 0)
        if unassigned:
            grouped.append({"id": None, "label": "", "issueCount": unassigned})
        return grouped

    @staticmethod
    def _issue_dict(issue: Issue, lang: Optional[str]) -> dict:
        return {
            "id": issue.id,
            "title": issue.title,
            "status": localized_label(issue.status, lang),
            "priority": localized_label(issue.priority, lang),
            "category": localized_label(issue.category, lang),
            "department": localized_label(issue.department, lang, NO_DEPARTMENT_LABEL),
            "dueDate": issue.due_date.isoformat() if issue.due_date else None,
            "createdAt": issue.created_at.isoformat() if issue.created_at else None,
        }
