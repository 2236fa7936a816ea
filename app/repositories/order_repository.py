"""주문 레포지토리 — 주문 엔티티 조회 전략 모음.

Order Repository — Entity-returning order queries.

Each list query is a different loading strategy for the same result set:

    find_all_by_search
        루트만 조회. 연관 엔티티는 호출 측이 주문마다 개별 조회 (1 + N).
        Roots only; callers resolve associations per order.
    find_all_with_member_delivery
        xToOne 페치 조인, 쿼리 1번. Fetch join of member and delivery.
    find_all_with_item
        컬렉션까지 페치 조인, 쿼리 1번, 페이징 불가.
        Fetch join including the line collection; rows multiply per line,
        so the result is collapsed in memory and cannot be paged in SQL.
    find_all_with_member_delivery_paged
        xToOne 페치 조인 + OFFSET/LIMIT, 컬렉션은 IN 쿼리로 일괄 조회 (1 + 1).
        Paged fetch join of the to-one side, lines batch-loaded with one IN query.

All list queries accept the same OrderSearch filter and order by order id.
"""

from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, joinedload, selectinload

from app.config import settings
from app.models.member import Member
from app.models.order import Order, OrderItem
from app.repositories.base import BaseRepository
from app.schemas.order import OrderSearch


class OrderRepository(BaseRepository[Order]):
    """주문 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the orders table.
    """

    def __init__(self) -> None:
        super().__init__(Order)

    @staticmethod
    def search_criteria(search: OrderSearch | None) -> list[ColumnElement[bool]]:
        """검색 조건으로 WHERE 절 조건 목록을 만듭니다.

        Build the WHERE predicates for an order search: none, one or both of
        status equality and member-name partial match. Blank values are
        ignored. The predicates reference Member, so the query must join it.

        Args:
            search: 검색 조건 (Search filters, may be None)

        Returns:
            list[ColumnElement[bool]]: 조건 목록 (Predicates to AND together)
        """
        criteria: list[ColumnElement[bool]] = []
        if search is None:
            return criteria

        # 주문 상태 검색 — Order status filter
        if search.order_status is not None:
            criteria.append(Order.status == search.order_status)

        # 회원 이름 검색 — Member name filter (partial match)
        if search.member_name is not None and search.member_name.strip():
            # '%', '_' 는 문자 그대로 매칭 — Wildcards in the input match literally
            criteria.append(Member.name.contains(search.member_name.strip(), autoescape=True))

        return criteria

    async def find_all_by_search(
        self,
        db: AsyncSession,
        search: OrderSearch | None = None,
    ) -> list[Order]:
        """검색 조건으로 주문을 조회합니다 (최대 1000건).

        Search orders by the optional filters, capped at
        ``ORDER_SEARCH_MAX_RESULTS`` rows. Only the order rows are loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search: 검색 조건 (Search filters)

        Returns:
            list[Order]: 연관 엔티티가 로드되지 않은 주문 목록
                         (Orders without associations loaded)
        """
        query: Select = (
            select(Order)
            .join(Order.member)
            .where(*self.search_criteria(search))
            .order_by(Order.id)
            .limit(settings.ORDER_SEARCH_MAX_RESULTS)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def load_member_delivery(self, order: Order) -> Order:
        """주문 한 건의 회원과 배송을 개별 쿼리로 로드합니다.

        Resolve member and delivery of one order with explicit awaited loads,
        one SELECT each unless already in the identity map. Calling this per
        order of a list is the N+1 pattern.
        """
        await order.awaitable_attrs.member
        await order.awaitable_attrs.delivery
        return order

    async def load_order_items(self, order: Order) -> Order:
        """주문 한 건의 주문 상품과 각 상품을 개별 쿼리로 로드합니다.

        Resolve the lines of one order, then the item of every line, with
        explicit awaited loads (one SELECT for the lines plus one per item
        not yet in the identity map).
        """
        order_items: list[OrderItem] = await order.awaitable_attrs.order_items
        for order_item in order_items:
            await order_item.awaitable_attrs.item
        return order

    def _with_member_delivery(self, search: OrderSearch | None) -> Select:
        """회원/배송 페치 조인 기본 쿼리 (Base fetch-join query for the to-one side)."""
        return (
            select(Order)
            .join(Order.member)
            .join(Order.delivery)
            .options(contains_eager(Order.member), contains_eager(Order.delivery))
            .where(*self.search_criteria(search))
        )

    async def find_all_with_member_delivery(
        self,
        db: AsyncSession,
        search: OrderSearch | None = None,
    ) -> list[Order]:
        """회원과 배송을 페치 조인으로 한 번에 조회합니다 (최대 1000건).

        Fetch orders with member and delivery in a single joined query,
        capped at ``ORDER_SEARCH_MAX_RESULTS`` rows. Order lines are not loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search: 검색 조건 (Search filters)
        """
        query: Select = (
            self._with_member_delivery(search)
            .order_by(Order.id)
            .limit(settings.ORDER_SEARCH_MAX_RESULTS)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_all_with_item(
        self,
        db: AsyncSession,
        search: OrderSearch | None = None,
    ) -> list[Order]:
        """주문 상품 컬렉션까지 페치 조인으로 한 번에 조회합니다.

        Fetch orders with member, delivery, lines and items in one query.
        The one-to-many join returns one row per line; ``unique()`` collapses
        the duplicated order rows. OFFSET/LIMIT would apply to lines, not
        orders, so this query is never paged in SQL and the
        ``ORDER_SEARCH_MAX_RESULTS`` cap is applied to the collapsed orders.
        """
        query: Select = (
            self._with_member_delivery(search)
            .outerjoin(Order.order_items)
            .outerjoin(OrderItem.item)
            .options(contains_eager(Order.order_items).contains_eager(OrderItem.item))
            .order_by(Order.id, OrderItem.id)
        )
        result = await db.execute(query)
        orders: list[Order] = list(result.unique().scalars().all())
        return orders[: settings.ORDER_SEARCH_MAX_RESULTS]

    async def find_all_with_member_delivery_paged(
        self,
        db: AsyncSession,
        offset: int,
        limit: int,
        search: OrderSearch | None = None,
    ) -> list[Order]:
        """xToOne 페치 조인 + 페이징, 컬렉션은 IN 쿼리로 일괄 조회합니다.

        Page over orders with member and delivery fetch-joined (to-one joins
        do not multiply rows, so OFFSET/LIMIT stay correct), then load the
        lines of the whole page, with their items, in one ``IN (...)`` query.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            offset: 건너뛸 주문 수 (Orders to skip)
            limit: 최대 주문 수, ORDER_SEARCH_MAX_RESULTS 이하로 제한
                   (Maximum orders to return, never above ORDER_SEARCH_MAX_RESULTS)
            search: 검색 조건 (Search filters)

        Returns:
            list[Order]: 완전히 로드된 주문 목록 (Fully loaded orders)
        """
        query: Select = (
            self._with_member_delivery(search)
            .options(selectinload(Order.order_items).joinedload(OrderItem.item))
            .order_by(Order.id)
            .offset(offset)
            .limit(min(limit, settings.ORDER_SEARCH_MAX_RESULTS))
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_with_lines(
        self,
        db: AsyncSession,
        order_id: int,
    ) -> Order | None:
        """주문 한 건을 배송, 회원, 주문 상품, 상품과 함께 잠그고 조회합니다.

        Retrieve one order aggregate fully loaded, locking the order row
        (``FOR UPDATE OF orders``) so concurrent cancellations serialise.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_id: 주문 ID (Order id)

        Returns:
            Order | None: 로드된 주문 또는 None (Loaded order or None)
        """
        query: Select = (
            select(Order)
            .options(
                joinedload(Order.member),
                joinedload(Order.delivery),
                selectinload(Order.order_items).joinedload(OrderItem.item),
            )
            .where(Order.id == order_id)
            .with_for_update(of=Order)
        )
        result = await db.execute(query)
        return result.unique().scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
order_repository: OrderRepository = OrderRepository()
