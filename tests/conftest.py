"""테스트 인프라 / 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure / In-memory SQLite database, session, and httpx client fixtures.
Each test gets a fresh schema on its own engine, so no cleanup is needed.
"""

import os

# 앱 임포트 전에 테스트 DB URL 지정 / Point settings at SQLite before the app is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from person_app.database import Base, get_db  # noqa: E402
from person_app.main import app  # noqa: E402
from person_app.models import Person  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 단일 연결을 공유하는 인메모리 DB에 스키마를 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 / DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def make_person(db: AsyncSession, first_name: str, last_name: str) -> Person:
    """테스트용 사람을 생성하고 커밋합니다."""
    person = Person(first_name=first_name, last_name=last_name)
    db.add(person)
    await db.commit()
    await db.refresh(person)
    return person


@pytest_asyncio.fixture
async def persons(db: AsyncSession) -> list[Person]:
    """성 순서가 삽입 순서와 다른 샘플 사람 3명을 생성합니다."""
    return [
        await make_person(db, "John", "Smith"),
        await make_person(db, "Jane", "Doe"),
        await make_person(db, "Foo", "Bar"),
    ]
