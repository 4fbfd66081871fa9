"""테스트 인프라 — 임시 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary SQLite DB, session, and httpx client fixtures.
Each test gets its own database file (aiosqlite) with foreign keys enforced,
so cascading deletes and FK violations behave like PostgreSQL.
API requests each open their own session, as in production.
"""

import os
from collections.abc import AsyncGenerator
from datetime import date
from pathlib import Path

# 앱 임포트 전에 설정 — Must be set before app.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ["AXIOM_API_TOKEN"] = ""

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import *  # noqa: F401,F403,E402 — register all models with metadata
from app.models.oshi_group import OshiGroup  # noqa: E402
from app.models.oshi_member import OshiMember  # noqa: E402
from app.utils.jwt import create_access_token  # noqa: E402

USER_ID = 9
OTHER_USER_ID = 10


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 새 DB 파일에 스키마를 생성합니다."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    enable_sqlite_foreign_keys(eng)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다. 커밋되지 않은 변경은 롤백됩니다."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 요청마다 테스트 DB의 새 세션을 사용합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def make_group(
    db: AsyncSession,
    user_id: int = USER_ID,
    group_name: str = "Test Group",
    group_id: int | None = None,
    company: str | None = None,
) -> OshiGroup:
    """그룹을 생성하고 커밋합니다."""
    group = OshiGroup(user_id=user_id, group_name=group_name, company=company)
    if group_id is not None:
        group.id = group_id
    db.add(group)
    await db.commit()
    await db.refresh(group)
    return group


async def make_member(
    db: AsyncSession,
    group: OshiGroup,
    member_name: str = "Yui",
    gender: int = 1,
    birth_day: date = date(2000, 1, 1),
) -> OshiMember:
    """멤버를 생성하고 커밋합니다."""
    member = OshiMember(member_name, gender, birth_day)
    member.group_id = group.id
    db.add(member)
    await db.commit()
    await db.refresh(member)
    return member


@pytest_asyncio.fixture
async def group(db: AsyncSession) -> OshiGroup:
    """USER_ID 소유 테스트 그룹."""
    return await make_group(db, USER_ID, "Test Group", company="Test Agency")


@pytest_asyncio.fixture
async def other_group(db: AsyncSession) -> OshiGroup:
    """OTHER_USER_ID 소유 테스트 그룹."""
    return await make_group(db, OTHER_USER_ID, "Other Group")


@pytest_asyncio.fixture
async def member(db: AsyncSession, group: OshiGroup) -> OshiMember:
    """테스트 그룹 소속 멤버."""
    return await make_member(db, group)


def make_token(user_id: int) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({"sub": str(user_id)})


@pytest.fixture
def user_token() -> str:
    return make_token(USER_ID)


@pytest.fixture
def other_token() -> str:
    return make_token(OTHER_USER_ID)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
