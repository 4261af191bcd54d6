"""
API Routes - endpoint definitions for the Factory Issue Dashboard

Endpoints organized by:
- Health Check
- Rankings (top resolvers, commenters, finders)
- Dashboard (issue statistics)

All routes except the health check require a signed-in session.
"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from config import settings
from database import get_database_url
from processor.dashboard import DashboardService
from processor.leaderboards import LeaderboardService
from processor.ranking import DateRange, TTLCache
from .dependencies import (
    get_commenter_cache,
    get_dashboard_service,
    get_date_range,
    get_leaderboard_service,
    require_user,
)

router = APIRouter()

CACHE_HEADERS = {"Cache-Control": "public, max-age=1800"}
SERVER_ERROR = "Server error"


# ============================================================
# Health Check
# ============================================================
@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "database": get_database_url().split("///")[0],
    }


# ============================================================
# Rankings
# ============================================================
@router.get("/rankings/resolvers", dependencies=[Depends(require_user)])
async def top_resolvers(
    lang: Optional[str] = Query(default=None, description="ko, en or th"),
    limit: Optional[int] = Query(default=None, ge=1, le=20),
    date_range: Optional[DateRange] = Depends(get_date_range),
    service: LeaderboardService = Depends(get_leaderboard_service),
):
    """
    Top issue resolvers.

    Resolved issues are counted per solver (filtered on their last update),
    then weighted by priority and resolution speed.
    """
    lang = lang or settings.DEFAULT_LANGUAGE
    try:
        entries = await service.top_resolvers(date_range, lang, limit or settings.RANKING_LIMIT)
    except SQLAlchemyError as e:
        logger.exception(f"Failed to load top resolvers: {e}")
        raise HTTPException(status_code=500, detail=SERVER_ERROR)

    return [entry.to_dict() for entry in entries]


@router.get("/rankings/commenters", dependencies=[Depends(require_user)])
async def top_commenters(
    lang: Optional[str] = Query(default=None, description="ko, en or th"),
    limit: Optional[int] = Query(default=None, ge=1, le=20),
    refresh: bool = Query(default=False, description="Bypass the cached ranking"),
    date_range: Optional[DateRange] = Depends(get_date_range),
    service: LeaderboardService = Depends(get_leaderboard_service),
    cache: TTLCache = Depends(get_commenter_cache),
):
    """
    Top commenters.

    The unfiltered ranking is cached for 30 minutes per language. When a
    fresh computation fails, the last cached ranking is served instead.
    """
    lang = lang or settings.DEFAULT_LANGUAGE
    limit = limit or settings.RANKING_LIMIT
    cache_key = f"commenters:{lang}:{limit}"
    cacheable = date_range is None

    if cacheable and not refresh:
        cached = cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Serving cached commenter ranking for {cache_key}")
            return JSONResponse(cached, headers=CACHE_HEADERS)

    try:
        entries = await service.top_commenters(date_range, lang, limit)
    except Exception as e:
        logger.exception(f"Failed to load top commenters: {e}")
        stale = cache.get_stale(cache_key)
        if stale is not None:
            logger.warning(f"Serving stale commenter ranking for {cache_key}")
            return JSONResponse(stale, headers=CACHE_HEADERS)
        raise HTTPException(status_code=500, detail="Failed to load commenter rankings")

    payload = [entry.to_dict() for entry in entries]
    if cacheable:
        cache.set(cache_key, payload)

    return JSONResponse(payload, headers=CACHE_HEADERS)


@router.get("/rankings/finders", dependencies=[Depends(require_user)])
async def top_finders(
    lang: Optional[str] = Query(default=None, description="ko, en or th"),
    limit: Optional[int] = Query(default=None, ge=1, le=20),
    date_range: Optional[DateRange] = Depends(get_date_range),
    service: LeaderboardService = Depends(get_leaderboard_service),
):
    """
    Top issue finders.

    Ranked by reported issue count; equal counts are split by the
    severity score of the reported issues.
    """
    lang = lang or settings.DEFAULT_LANGUAGE
    try:
        entries = await service.top_finders(date_range, lang, limit or settings.RANKING_LIMIT)
    except SQLAlchemyError as e:
        logger.exception(f"Failed to load top finders: {e}")
        raise HTTPException(status_code=500, detail=SERVER_ERROR)

    return [entry.to_dict() for entry in entries]


# ============================================================
# Dashboard Summary
# ============================================================
@router.get("/dashboard", dependencies=[Depends(require_user)])
async def get_dashboard_summary(
    lang: Optional[str] = Query(default=None, description="ko, en or th"),
    service: DashboardService = Depends(get_dashboard_service),
):
    """
    Get dashboard statistics in one call.

    Optimized for frontend to minimize API calls.
    """
    try:
        return await service.summary(lang or settings.DEFAULT_LANGUAGE)
    except SQLAlchemyError as e:
        logger.exception(f"Failed to load dashboard summary: {e}")
        raise HTTPException(status_code=500, detail=SERVER_ERROR)
