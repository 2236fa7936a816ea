"""주문 서비스 — 주문 생성, 취소, 검색 비즈니스 로직.

Order Service — Business logic for placing, cancelling and searching orders.

Placement and cancellation each run inside the caller's single transaction:
every check happens before the first mutation, and every mutation is
written with an explicit repository ``update`` call. The router commits only
after the service returns, so any raised error leaves nothing committed.
"""

from dataclasses import replace

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.delivery import Delivery, DeliveryStatus
from app.models.item import Item
from app.models.member import Member
from app.models.order import Order, OrderItem
from app.repositories.item_repository import item_repository
from app.repositories.member_repository import member_repository
from app.repositories.order_repository import order_repository
from app.schemas.order import OrderCancelResponse, OrderSearch, SimpleOrderDto
from app.services.order_query_service import to_simple_order_dto
from app.utils.exceptions import ConflictError, NotFoundError
from app.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """주문 관련 비즈니스 로직을 처리하는 서비스.

    Service handling order placement, cancellation and search.
    """

    async def order(
        self,
        db: AsyncSession,
        member_id: int,
        item_id: int,
        count: int,
    ) -> int:
        """주문을 생성합니다.

        Place an order for ``count`` units of one item.

        Steps:
            1. 회원 조회 (Load the member)
            2. 상품 행 잠금 조회 (Load and lock the item row)
            3. 회원 주소로 배송 정보 생성 (Delivery from the member's address)
            4. 주문 상품 생성 — 재고 차감 (Order line; removes stock or raises)
            5. 재고 명시적 반영 — 버전 검사 (Explicit stock update, version-checked)
            6. 주문 저장 (Persist the aggregate)

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 회원 ID (Member id)
            item_id: 상품 ID (Item id)
            count: 주문 수량 (Quantity)

        Returns:
            int: 새 주문 ID (New order id)

        Raises:
            NotFoundError: 회원 또는 상품이 없을 때 (Unknown member or item)
            BadRequestError: 수량이 0 이하일 때, 재고는 그대로 (Non-positive count; stock unchanged)
            OutOfStockError: 재고가 부족할 때, 재고는 그대로 (Not enough stock; stock unchanged)
            ConflictError: 다른 트랜잭션이 재고를 먼저 바꿨을 때 (Stale item version)
        """
        member: Member | None = await member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")

        item: Item | None = await item_repository.get_for_update(db, item_id)
        if item is None:
            raise NotFoundError("Item not found")

        delivery = Delivery(
            address=replace(member.address) if member.address is not None else None,
            status=DeliveryStatus.READY,
        )

        order_item: OrderItem = OrderItem.create_order_item(item, item.price, count)
        if not await item_repository.update(db, item):
            raise ConflictError("Item stock was modified concurrently")

        order: Order = Order.create_order(member, delivery, order_item)
        await order_repository.create(db, order)

        logger.info(
            "order_placed",
            order_id=order.id,
            member_id=member_id,
            item_id=item_id,
            count=count,
            remaining_stock=item.stock_quantity,
        )
        return order.id

    async def cancel_order(self, db: AsyncSession, order_id: int) -> OrderCancelResponse:
        """주문을 취소합니다.

        Cancel an order and restore the stock of every line. An order that
        is already canceled, or already delivered, is rejected.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_id: 주문 ID (Order id)

        Returns:
            OrderCancelResponse: 취소된 주문 ID와 상태 (Order id and CANCELED)

        Raises:
            NotFoundError: 주문이 없을 때 (Unknown order)
            BadRequestError: 이미 취소 또는 배송 완료된 주문 (Already canceled or delivered)
            ConflictError: 상품 재고 반영 충돌 (Stale item version)
        """
        order: Order | None = await order_repository.get_with_lines(db, order_id)
        if order is None:
            raise NotFoundError("Order not found")

        order.cancel()

        for order_item in order.order_items:
            if not await item_repository.update(db, order_item.item):
                raise ConflictError("Item stock was modified concurrently")
        if not await order_repository.update(db, order):
            raise ConflictError("Order was modified concurrently")

        logger.info("order_canceled", order_id=order.id, lines=len(order.order_items))
        return OrderCancelResponse(order_id=order.id, status=order.status)

    async def find_orders(self, db: AsyncSession, search: OrderSearch) -> list[SimpleOrderDto]:
        """검색 조건으로 주문을 조회합니다 (최대 ORDER_SEARCH_MAX_RESULTS건).

        Search orders by member name and/or status.
        """
        orders: list[Order] = await order_repository.find_all_with_member_delivery(db, search)
        return [to_simple_order_dto(o) for o in orders]


# 싱글턴 인스턴스 — Singleton instance
order_service: OrderService = OrderService()
