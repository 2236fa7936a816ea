"""주문 직접 조회 레포지토리 — 엔티티 없이 DTO로 바로 조회.

Order Query Repository — Reads orders straight into projection DTOs.
The root query selects order, member name and delivery columns
(to-one joins, one row per order); order lines are a second query.
"""

from collections import defaultdict

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.delivery import Delivery
from app.models.item import Item
from app.models.member import Member
from app.models.order import Order, OrderItem
from app.repositories.order_repository import OrderRepository
from app.schemas.common import AddressSchema
from app.schemas.order import OrderSearch
from app.schemas.order_query import OrderItemQueryDto, OrderQueryDto


class OrderQueryRepository:
    """주문 조회 전용 DTO 쿼리를 담당하는 레포지토리.

    Repository for projection queries that build OrderQueryDto directly.
    """

    async def find_order_query_dtos(
        self,
        db: AsyncSession,
        search: OrderSearch | None = None,
    ) -> list[OrderQueryDto]:
        """주문 DTO를 조회하고 주문마다 주문 상품을 추가 조회합니다.

        Query order DTOs, then one line query per order (1 + N queries).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search: 검색 조건 (Search filters)

        Returns:
            list[OrderQueryDto]: 주문 상품이 채워진 DTO 목록 (DTOs with lines)
        """
        # xToOne 관계는 한 번에 조회 — To-one data in one query
        result: list[OrderQueryDto] = await self._find_orders(db, search)

        # 컬렉션은 주문마다 추가 쿼리 — One extra query per order for lines
        for order_dto in result:
            order_dto.order_items = await self._find_order_items(db, order_dto.order_id)

        return result

    async def find_all_by_dto_optimization(
        self,
        db: AsyncSession,
        search: OrderSearch | None = None,
    ) -> list[OrderQueryDto]:
        """주문 DTO와 주문 상품을 쿼리 2번으로 조회합니다.

        Query order DTOs, then every line of those orders in one ``IN (...)``
        query, attached through an ``order_id -> lines`` map (2 queries;
        1 when there are no orders).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search: 검색 조건 (Search filters)

        Returns:
            list[OrderQueryDto]: 주문 상품이 채워진 DTO 목록 (DTOs with lines)
        """
        result: list[OrderQueryDto] = await self._find_orders(db, search)

        order_item_map: dict[int, list[OrderItemQueryDto]] = await self._find_order_item_map(
            db, [order_dto.order_id for order_dto in result]
        )

        # 메모리에서 매칭 — 추가 쿼리 없음 (Attach in memory, no more queries)
        for order_dto in result:
            order_dto.order_items = order_item_map.get(order_dto.order_id, [])

        return result

    async def _find_orders(
        self,
        db: AsyncSession,
        search: OrderSearch | None,
    ) -> list[OrderQueryDto]:
        """주문 + 회원 이름 + 배송지를 한 번에 조회 (Root projection, to-one only, capped)."""
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
            OrderQueryDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=AddressSchema(city=city, street=street, zipcode=zipcode),
            )
            for order_id, name, order_date, status, city, street, zipcode in rows
        ]

    @staticmethod
    def _order_items_query() -> Select:
        return (
            select(OrderItem.order_id, Item.name, OrderItem.order_price, OrderItem.count)
            .join(OrderItem.item)
        )

    async def _find_order_items(
        self,
        db: AsyncSession,
        order_id: int,
    ) -> list[OrderItemQueryDto]:
        """주문 한 건의 주문 상품을 조회 (Lines of a single order)."""
        query: Select = (
            self._order_items_query()
            .where(OrderItem.order_id == order_id)
            .order_by(OrderItem.id)
        )
        rows = (await db.execute(query)).all()
        return [
            OrderItemQueryDto(order_id=oid, item_name=item_name, order_price=order_price, count=count)
            for oid, item_name, order_price, count in rows
        ]

    async def _find_order_item_map(
        self,
        db: AsyncSession,
        order_ids: list[int],
    ) -> dict[int, list[OrderItemQueryDto]]:
        """여러 주문의 주문 상품을 한 번에 조회해 주문 ID별로 묶습니다.

        Load the lines of all given orders in one query and group them by
        order id. Line order within each order follows the line id.
        """
        if not order_ids:
            return {}

        query: Select = (
            self._order_items_query()
            .where(OrderItem.order_id.in_(order_ids))
            .order_by(OrderItem.order_id, OrderItem.id)
        )
        rows = (await db.execute(query)).all()

        order_item_map: dict[int, list[OrderItemQueryDto]] = defaultdict(list)
        for oid, item_name, order_price, count in rows:
            order_item_map[oid].append(
                OrderItemQueryDto(order_id=oid, item_name=item_name, order_price=order_price, count=count)
            )
        return order_item_map


# 싱글턴 인스턴스 — Singleton instance
order_query_repository: OrderQueryRepository = OrderQueryRepository()
