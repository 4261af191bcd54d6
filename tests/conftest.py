"""
Shared fixtures: an in-memory database per test and an API client bound to it.
"""
from datetime import datetime, timedelta

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from api.dependencies import require_user
from api.main import create_app
from database import get_session_dependency
from database.models import (
    Base,
    Category,
    Department,
    Employee,
    Issue,
    IssueComment,
    Priority,
    Status,
)

T0 = datetime(2025, 3, 1, 9, 0, 0)


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        await seed_lookups(session)
        await session.commit()
        yield session


@pytest.fixture
def app(session_factory):
    app = create_app()

    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session_dependency] = override_session
    return app


@pytest.fixture
def authed_app(app):
    app.dependency_overrides[require_user] = lambda: 1
    return app


@pytest_asyncio.fixture
async def client(authed_app, session):
    transport = httpx.ASGITransport(app=authed_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def anonymous_client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ============================================
# SEED HELPERS
# ============================================

async def seed_lookups(session: AsyncSession) -> None:
    """Departments, tiers, one category and five employees."""
    session.add_all([
        Department(id=1, name="Production", label="생산부", thai_label="ฝ่ายผลิต"),
        Department(id=2, name="Quality", label="품질관리부", thai_label=None),
        Priority(id=1, name="Critical", label="긴급", thai_label="วิกฤต"),
        Priority(id=2, name="High", label="높음", thai_label="สูง"),
        Priority(id=3, name="Medium", label="보통", thai_label="ปานกลาง"),
        Priority(id=4, name="Low", label="낮음", thai_label="ต่ำ"),
        Status(id=1, name="Open", label="미해결"),
        Status(id=2, name="In progress", label="진행중"),
        Status(id=3, name="Resolved", label="완료"),
        Status(id=4, name="Verified", label="확인"),
        Status(id=5, name="Closed", label="종료"),
        Category(id=1, name="Machine failure", label="기계 고장"),
    ])
    await session.flush()
    session.add_all([
        Employee(id=1, employee_id="E001", korean_name="김철수", thai_name="คิม", nickname="Kim", department_id=1),
        Employee(id=2, employee_id="E002", korean_name="이영희", thai_name=None, department_id=2),
        Employee(id=3, employee_id="E003", korean_name="박지성", thai_name="ปาร์ค", department_id=1),
        Employee(id=4, employee_id="E004", korean_name="최민수", department_id=2),
        Employee(id=5, employee_id="E005", korean_name="정다은", department_id=None),
    ])
    await session.flush()


def make_issue(
    issue_id: int,
    priority_id: int = 3,
    status_id: int = 1,
    solver_id: int = None,
    assignee_id: int = None,
    created_at: datetime = T0,
    resolved_after_hours: float = 72,
    **kwargs
) -> Issue:
    return Issue(
        id=issue_id,
        title=f"Issue {issue_id}",
        priority_id=priority_id,
        status_id=status_id,
        category_id=1,
        department_id=kwargs.pop("department_id", 1),
        solver_id=solver_id,
        assignee_id=assignee_id,
        created_at=created_at,
        updated_at=created_at + timedelta(hours=resolved_after_hours),
        **kwargs
    )


def make_comment(comment_id: int, issue_id: int, author_id: int, created_at: datetime = T0) -> IssueComment:
    return IssueComment(
        id=comment_id,
        issue_id=issue_id,
        author_id=author_id,
        content=f"comment {comment_id}",
        created_at=created_at,
    )
