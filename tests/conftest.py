"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Every test gets a fresh schema on a single shared aiosqlite connection.
A SELECT counter hooked on the engine verifies SQL round trips.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Address, Book, Member, Order
from app.seed import seed_member_order

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 새로 생성합니다."""
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
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def file_session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """파일 SQLite DB 세션 팩토리 — 세션마다 별도 커넥션.

    Sessions from this factory each check out their own pooled connection,
    so two open sessions act as two concurrent transactions.
    """
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'shop.db'}")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(eng, class_=AsyncSession, expire_on_commit=False)
    await eng.dispose()


# ---------------------------------------------------------------------------
# SQL 카운터 — SELECT round-trip counter
# ---------------------------------------------------------------------------
class QueryCounter:
    """엔진에서 실행된 SELECT 문을 기록합니다 (Records executed SELECT statements)."""

    def __init__(self) -> None:
        self.statements: list[str] = []

    def __call__(
        self,
        conn: Any,
        cursor: Any,
        statement: str,
        parameters: Any,
        context: Any,
        executemany: bool,
    ) -> None:
        if statement.lstrip().upper().startswith("SELECT"):
            self.statements.append(statement)

    @property
    def count(self) -> int:
        return len(self.statements)

    def reset(self) -> None:
        self.statements.clear()


@pytest.fixture
def query_counter(engine: AsyncEngine) -> Generator[QueryCounter, None, None]:
    counter = QueryCounter()
    event.listen(engine.sync_engine, "before_cursor_execute", counter)
    yield counter
    event.remove(engine.sync_engine, "before_cursor_execute", counter)


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest.fixture
def create_member(db: AsyncSession) -> Callable[..., Awaitable[Member]]:
    """테스트 회원 생성 함수를 제공합니다."""
    async def _create(name: str, city: str = "서울") -> Member:
        member = Member(name=name, address=Address(city=city, street="강가", zipcode="123-123"))
        db.add(member)
        await db.flush()
        return member

    return _create


@pytest.fixture
def create_book(db: AsyncSession) -> Callable[..., Awaitable[Book]]:
    """테스트 도서 생성 함수를 제공합니다."""
    async def _create(name: str, price: int, stock_quantity: int) -> Book:
        book = Book(name=name, price=price, stock_quantity=stock_quantity)
        db.add(book)
        await db.flush()
        return book

    return _create


@pytest_asyncio.fixture
async def member(db: AsyncSession, create_member) -> Member:
    """회원 1 — 서울."""
    m = await create_member("회원1")
    await db.commit()
    return m


@pytest_asyncio.fixture
async def books(db: AsyncSession, create_book) -> dict[str, Book]:
    """JPA(30000원, 재고 2000), Spring boot(40000원, 재고 200)."""
    result = {
        "jpa": await create_book("JPA", 30000, 2000),
        "spring": await create_book("Spring boot", 40000, 200),
    }
    await db.commit()
    return result


@pytest_asyncio.fixture
async def sample_orders(db: AsyncSession) -> list[int]:
    """userA, userB 각각 주문 1건(주문 상품 2개)을 만들고 세션을 비웁니다.

    Two members with one two-line order each. The identity map is cleared
    afterwards so reads in the test start cold.
    """
    orders: list[Order] = [
        await seed_member_order(
            db,
            "userA",
            Address(city="서울", street="1", zipcode="1111"),
            [("JPA1 BOOK", 10000, 100, 1), ("JPA2 BOOK", 20000, 100, 2)],
        ),
        await seed_member_order(
            db,
            "userB",
            Address(city="부산", street="2", zipcode="2222"),
            [("SPRING1 BOOK", 20000, 200, 3), ("SPRING2 BOOK", 40000, 300, 4)],
        ),
    ]
    order_ids = [o.id for o in orders]
    await db.commit()
    db.expunge_all()
    return order_ids
