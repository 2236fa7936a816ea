"""주문 라우터 — 주문 목록 조회 전략별 엔드포인트와 주문 명령.

Order Router — One list endpoint per read strategy (v1 ~ v5, v3.1) plus
order placement, cancellation and search.
Every list endpoint accepts the same optional search filters.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.schemas.order import (
    OrderCancelResponse,
    OrderCreate,
    OrderCreateResponse,
    OrderDto,
    OrderEntityResponse,
    OrderSearch,
    SimpleOrderDto,
)
from app.schemas.order_query import OrderQueryDto
from app.services.order_query_service import order_query_service
from app.services.order_service import order_service

router: APIRouter = APIRouter()


# ---------------------------------------------------------------------------
# 주문 목록 조회 — Order list read strategies
# ---------------------------------------------------------------------------

@router.get("/v1/orders", response_model=list[OrderEntityResponse])
async def orders_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[OrderSearch, Depends()],
) -> list[OrderEntityResponse]:
    """v1. 엔티티 형태 노출 — 연관 엔티티를 주문마다 개별 조회 (N+1).

    Entity-shaped payload; associations resolved per order.
    """
    return await order_query_service.orders_v1(db, search)


@router.get("/v2/orders", response_model=list[OrderDto])
async def orders_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[OrderSearch, Depends()],
) -> list[OrderDto]:
    """v2. 엔티티를 DTO로 변환 — 지연 로딩과 같은 횟수의 SQL 실행.

    Order : 1번, member/delivery : N번, orderItem : N번, item : 최대 M번.
    """
    return await order_query_service.orders_v2(db, search)


@router.get("/v3/orders", response_model=list[OrderDto])
async def orders_v3(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[OrderSearch, Depends()],
) -> list[OrderDto]:
    """v3. 엔티티를 DTO로 변환 + 페치 조인 — SQL 1번, 페이징 불가."""
    return await order_query_service.orders_v3(db, search)


@router.get("/v3.1/orders", response_model=list[OrderDto])
async def orders_v3_page(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[OrderSearch, Depends()],
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=1000)] = settings.DEFAULT_PAGE_LIMIT,
) -> list[OrderDto]:
    """v3.1. 엔티티를 DTO로 변환 + 페이징.

    - xToOne 관계는 페치 조인 (To-one joins do not multiply rows, so paging is safe)
    - 컬렉션은 IN 쿼리로 일괄 조회 (Lines of the page loaded in one IN query)
    """
    return await order_query_service.orders_v3_page(db, offset, limit, search)


@router.get("/v4/orders", response_model=list[OrderQueryDto])
async def orders_v4(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[OrderSearch, Depends()],
) -> list[OrderQueryDto]:
    """v4. DTO 직접 조회 — 루트 1번, 컬렉션 N번."""
    return await order_query_service.orders_v4(db, search)


@router.get("/v5/orders", response_model=list[OrderQueryDto])
async def orders_v5(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[OrderSearch, Depends()],
) -> list[OrderQueryDto]:
    """v5. DTO 직접 조회 최적화 — 루트 1번, 컬렉션 1번 (MAP으로 O(1) 매칭)."""
    return await order_query_service.orders_v5(db, search)


# ---------------------------------------------------------------------------
# 주문 명령 및 검색 — Order commands and search
# ---------------------------------------------------------------------------

@router.post("/orders", response_model=OrderCreateResponse, status_code=201)
async def create_order(
    data: OrderCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderCreateResponse:
    """주문을 생성합니다.

    Place an order. 409 when the item does not have enough stock.
    """
    order_id: int = await order_service.order(db, data.member_id, data.item_id, data.count)
    await db.commit()
    return OrderCreateResponse(order_id=order_id)


@router.post("/orders/{order_id}/cancel", response_model=OrderCancelResponse)
async def cancel_order(
    order_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderCancelResponse:
    """주문을 취소합니다.

    Cancel an order. 404 when unknown, 400 when already canceled or delivered.
    """
    result: OrderCancelResponse = await order_service.cancel_order(db, order_id)
    await db.commit()
    return result


@router.get("/orders", response_model=list[SimpleOrderDto])
async def search_orders(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[OrderSearch, Depends()],
) -> list[SimpleOrderDto]:
    """주문 검색 — 회원 이름, 주문 상태 (Search by member name and/or status)."""
    return await order_service.find_orders(db, search)
