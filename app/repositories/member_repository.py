"""회원 레포지토리 — 회원 조회 및 회원별 주문 ID 인덱스.

Member Repository — Member queries plus the read-only member → order ids
lookup that replaces a back-reference collection on the entity.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.models.order import Order
from app.repositories.base import BaseRepository


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the members table.
    """

    def __init__(self) -> None:
        super().__init__(Member)

    async def find_all(self, db: AsyncSession) -> list[Member]:
        """모든 회원을 ID 순으로 조회합니다 (All members ordered by id)."""
        return list(await self.get_all(db))

    async def find_order_ids(self, db: AsyncSession, member_id: int) -> list[int]:
        """회원의 주문 ID 목록을 조회합니다.

        Look up the ids of a member's orders, ascending.
        This is a read-only index; orders are never reached through the member.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 회원 ID (Member id)

        Returns:
            list[int]: 주문 ID 목록 (Order ids)
        """
        query: Select = (
            select(Order.id)
            .where(Order.member_id == member_id)
            .order_by(Order.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
