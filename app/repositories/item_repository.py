"""상품 레포지토리 — 상품 조회 및 재고 변경용 잠금 조회.

Item Repository — Item queries, including the row-locking read used
before a stock mutation.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.item import Item
from app.repositories.base import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """상품 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the items table.
    Queries against Item return Book / Album / Movie instances.
    """

    def __init__(self) -> None:
        super().__init__(Item)

    async def find_all(self, db: AsyncSession) -> list[Item]:
        """모든 상품을 ID 순으로 조회합니다 (All items ordered by id)."""
        return list(await self.get_all(db))

    async def get_for_update(self, db: AsyncSession, item_id: int) -> Item | None:
        """재고 변경을 위해 상품 행을 잠그고 조회합니다.

        Retrieve an item with ``SELECT ... FOR UPDATE`` so that concurrent
        orders on the same item are serialised until this transaction ends.
        Dialects without row locks ignore the clause; the version column
        still guards the following UPDATE.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            item_id: 상품 ID (Item id)

        Returns:
            Item | None: 잠긴 상품 또는 None (Locked item or None)
        """
        query: Select = (
            select(Item)
            .where(Item.id == item_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
item_repository: ItemRepository = ItemRepository()
