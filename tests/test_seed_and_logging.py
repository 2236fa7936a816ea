"""시드 스크립트와 요청 로깅 테스트.

Seed script and request logging tests.
"""

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

import app.seed as seed_module
from app.middleware.request_logging import mask_sensitive
from app.models import Item, Member, Order


class TestSeed:
    """샘플 데이터 시드 테스트."""

    async def test_seed_is_idempotent(
        self,
        engine: AsyncEngine,
        session_factory: async_sessionmaker[AsyncSession],
        monkeypatch,
    ):
        monkeypatch.setattr(seed_module, "engine", engine)
        monkeypatch.setattr(seed_module, "async_session", session_factory)

        await seed_module.seed()
        await seed_module.seed()

        async with session_factory() as db:
            assert await db.scalar(select(func.count()).select_from(Member)) == 2
            assert await db.scalar(select(func.count()).select_from(Order)) == 2
            stocks = (await db.execute(select(Item.name, Item.stock_quantity).order_by(Item.id))).all()
            assert [tuple(row) for row in stocks] == [
                ("JPA1 BOOK", 99),
                ("JPA2 BOOK", 98),
                ("SPRING1 BOOK", 197),
                ("SPRING2 BOOK", 296),
            ]


class TestRequestLogging:
    """요청 로깅 미들웨어 테스트."""

    def test_mask_sensitive(self):
        data = {"name": "kim", "password": "pw", "nested": {"api_key": "k", "city": "서울"}}
        assert mask_sensitive(data) == {
            "name": "kim",
            "password": "***",
            "nested": {"api_key": "***", "city": "서울"},
        }

    async def test_error_response_passes_through(self, client: AsyncClient):
        """에러 응답 body를 읽은 뒤에도 클라이언트는 같은 body를 받음."""
        res = await client.get("/api/v2/members/9999")
        assert res.status_code == 404
        assert res.json() == {"detail": "Member not found"}

    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}
