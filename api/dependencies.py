"""
FastAPI dependencies: session auth check, cache and service wiring.
"""
from typing import Optional

from fastapi import Depends, HTTPException, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_session_dependency
from processor.dashboard import DashboardService
from processor.leaderboards import LeaderboardService
from processor.ranking import DateRange, TTLCache
from .params import parse_date_range


async def require_user(request: Request) -> int:
    """
    Id of the signed-in employee.

    Sessions are issued by the login service and carried in the signed
    session cookie; a request without one is rejected with 401.
    """
    user_id = request.session.get("user_id")
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user_id


def get_commenter_cache(request: Request) -> TTLCache:
    """The application-wide commenter leaderboard cache."""
    return request.app.state.commenter_cache


async def get_date_range(
    from_: Optional[str] = Query(default=None, alias="from"),
    to: Optional[str] = Query(default=None),
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
) -> Optional[DateRange]:
    """Date range from `from`/`to` (or legacy `startDate`/`endDate`)."""
    return parse_date_range(from_, to, start_date, end_date)


async def get_leaderboard_service(
    session: AsyncSession = Depends(get_session_dependency)
) -> LeaderboardService:
    return LeaderboardService(session)


async def get_dashboard_service(
    session: AsyncSession = Depends(get_session_dependency)
) -> DashboardService:
    return DashboardService(session)
