"""주문 조회 서비스 — 주문 목록 조회 전략별 응답 조립.

Order Query Service — Assembles order list responses, one method per read
strategy. Every strategy returns the same orders for the same filter; they
differ only in how many SQL round trips they take and in payload shape.

Round trips for N orders:
    v1 / v2        1 + N (member, delivery, lines) + items not yet loaded
    v3             1 — collection fetch join, cannot be paged
    v3.1           2 per page — to-one fetch join paged, lines via IN query
    v4             1 + N — direct DTO projection, lines per order
    v5             2 — direct DTO projection, lines via one IN query
    simple v1/v2   1 + N (member, delivery)
    simple v3      1 — to-one fetch join
    simple v4      1 — direct DTO projection
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.order import Order, OrderItem
from app.repositories.order_query_repository import order_query_repository
from app.repositories.order_repository import order_repository
from app.repositories.order_simple_query_repository import order_simple_query_repository
from app.schemas.common import AddressSchema
from app.schemas.order import (
    OrderDto,
    OrderEntityResponse,
    OrderItemDto,
    OrderSearch,
    SimpleOrderDto,
    SimpleOrderEntityResponse,
)
from app.schemas.order_query import OrderQueryDto, OrderSimpleQueryDto


def to_simple_order_dto(order: Order) -> SimpleOrderDto:
    """주문 엔티티 → 간단 주문 DTO (member, delivery must be loaded)."""
    return SimpleOrderDto(
        order_id=order.id,
        name=order.member.name,
        order_date=order.order_date,
        order_status=order.status,
        address=AddressSchema.from_address(order.delivery.address),
    )


def to_order_item_dto(order_item: OrderItem) -> OrderItemDto:
    """주문 상품 엔티티 → 주문 상품 DTO (item must be loaded)."""
    return OrderItemDto(
        item_name=order_item.item.name,
        order_price=order_item.order_price,
        count=order_item.count,
    )


def to_order_dto(order: Order) -> OrderDto:
    """주문 엔티티 → 주문 DTO (member, delivery, lines and items must be loaded)."""
    return OrderDto(
        order_id=order.id,
        name=order.member.name,
        order_date=order.order_date,
        order_status=order.status,
        address=AddressSchema.from_address(order.delivery.address),
        order_items=[to_order_item_dto(oi) for oi in order.order_items],
    )


class OrderQueryService:
    """주문 목록 조회 전략을 제공하는 서비스.

    Service exposing every order list read strategy.
    """

    # === 주문 + 주문 상품 (Orders with lines) ===

    async def orders_v1(self, db: AsyncSession, search: OrderSearch) -> list[OrderEntityResponse]:
        """v1. 엔티티 형태 그대로 노출 — 연관 엔티티를 주문마다 개별 로드 (1 + N).

        Entity-shaped payload; every association resolved per order.
        """
        orders: list[Order] = await order_repository.find_all_by_search(db, search)
        for order in orders:
            await order_repository.load_member_delivery(order)
            await order_repository.load_order_items(order)
        return [OrderEntityResponse.model_validate(o) for o in orders]

    async def orders_v2(self, db: AsyncSession, search: OrderSearch) -> list[OrderDto]:
        """v2. 엔티티를 DTO로 변환 — 로딩은 v1과 동일 (1 + N).

        Same loading as v1, mapped to OrderDto.
        """
        orders: list[Order] = await order_repository.find_all_by_search(db, search)
        for order in orders:
            await order_repository.load_member_delivery(order)
            await order_repository.load_order_items(order)
        return [to_order_dto(o) for o in orders]

    async def orders_v3(self, db: AsyncSession, search: OrderSearch) -> list[OrderDto]:
        """v3. 엔티티를 DTO로 변환 + 컬렉션 페치 조인 (쿼리 1번, 페이징 불가)."""
        orders: list[Order] = await order_repository.find_all_with_item(db, search)
        return [to_order_dto(o) for o in orders]

    async def orders_v3_page(
        self,
        db: AsyncSession,
        offset: int,
        limit: int,
        search: OrderSearch,
    ) -> list[OrderDto]:
        """v3.1. xToOne 페치 조인 + 페이징, 컬렉션은 IN 쿼리 일괄 로드 (1 + 1)."""
        orders: list[Order] = await order_repository.find_all_with_member_delivery_paged(
            db, offset, limit, search
        )
        return [to_order_dto(o) for o in orders]

    async def orders_v4(self, db: AsyncSession, search: OrderSearch) -> list[OrderQueryDto]:
        """v4. DTO 직접 조회 — 루트 1번, 컬렉션 N번."""
        return await order_query_repository.find_order_query_dtos(db, search)

    async def orders_v5(self, db: AsyncSession, search: OrderSearch) -> list[OrderQueryDto]:
        """v5. DTO 직접 조회 최적화 — 루트 1번, 컬렉션 1번 (주문 ID → 주문 상품 맵)."""
        return await order_query_repository.find_all_by_dto_optimization(db, search)

    # === 간단 주문 — xToOne만 (Simple orders, to-one only) ===

    async def simple_orders_v1(
        self, db: AsyncSession, search: OrderSearch
    ) -> list[SimpleOrderEntityResponse]:
        """v1. 엔티티 형태 그대로 노출 — 회원/배송을 주문마다 개별 로드 (1 + N + N)."""
        orders: list[Order] = await order_repository.find_all_by_search(db, search)
        for order in orders:
            await order_repository.load_member_delivery(order)
        return [SimpleOrderEntityResponse.model_validate(o) for o in orders]

    async def simple_orders_v2(self, db: AsyncSession, search: OrderSearch) -> list[SimpleOrderDto]:
        """v2. 엔티티를 DTO로 변환 — 로딩은 v1과 동일 (1 + N + N)."""
        orders: list[Order] = await order_repository.find_all_by_search(db, search)
        for order in orders:
            await order_repository.load_member_delivery(order)
        return [to_simple_order_dto(o) for o in orders]

    async def simple_orders_v3(self, db: AsyncSession, search: OrderSearch) -> list[SimpleOrderDto]:
        """v3. 엔티티를 DTO로 변환 + 페치 조인 (쿼리 1번)."""
        orders: list[Order] = await order_repository.find_all_with_member_delivery(db, search)
        return [to_simple_order_dto(o) for o in orders]

    async def simple_orders_v4(
        self, db: AsyncSession, search: OrderSearch
    ) -> list[OrderSimpleQueryDto]:
        """v4. DTO 직접 조회 (쿼리 1번)."""
        return await order_simple_query_repository.find_order_dtos(db, search)


# 싱글턴 인스턴스 — Singleton instance
order_query_service: OrderQueryService = OrderQueryService()
