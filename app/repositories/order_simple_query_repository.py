"""간단 주문 직접 조회 레포지토리.

Order Simple Query Repository — One projection query for the simple order
list. Selecting only the needed columns trims the DB → app payload, at the
cost of tying this repository to one API response shape.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.delivery import Delivery
from app.models.member import Member
from app.models.order import Order
from app.repositories.order_repository import OrderRepository
from app.schemas.common import AddressSchema
from app.schemas.order import OrderSearch
from app.schemas.order_query import OrderSimpleQueryDto


class OrderSimpleQueryRepository:
    """간단 주문 DTO 직접 조회 레포지토리 (Projection query for simple orders)."""

    async def find_order_dtos(
        self,
        db: AsyncSession,
        search: OrderSearch | None = None,
    ) -> list[OrderSimpleQueryDto]:
        """주문, 회원 이름, 배송지를 DTO로 바로 조회합니다.

        Select order id, member name, order date, status and delivery
        address in one joined query, capped at ``ORDER_SEARCH_MAX_RESULTS``
        rows, and build DTOs from the rows.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search: 검색 조건 (Search filters)

        Returns:
            list[OrderSimpleQueryDto]: 주문 DTO 목록 (Simple order DTOs)
        """
        query: Select = (
            select(
                Order.id,
                Member.name,
                Order.order_date,
                Order.status,
                Delivery.city,
                Delivery.street,
                Delivery.zipcode,
            )
            .join(Order.member)
            .join(Order.delivery)
            .where(*OrderRepository.search_criteria(search))
            .order_by(Order.id)
            .limit(settings.ORDER_SEARCH_MAX_RESULTS)
        )
        rows = (await db.execute(query)).all()
        return [
            OrderSimpleQueryDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=AddressSchema(city=city, street=street, zipcode=zipcode),
            )
            for order_id, name, order_date, status, city, street, zipcode in rows
        ]


# 싱글턴 인스턴스 — Singleton instance
order_simple_query_repository: OrderSimpleQueryRepository = OrderSimpleQueryRepository()
