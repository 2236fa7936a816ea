"""간단 주문 라우터 — xToOne 관계(Order → Member, Order → Delivery) 조회 최적화.

Simple Order Router — Order lists resolving only the to-one associations.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.order import OrderSearch, SimpleOrderDto, SimpleOrderEntityResponse
from app.schemas.order_query import OrderSimpleQueryDto
from app.services.order_query_service import order_query_service

router: APIRouter = APIRouter()


@router.get("/v1/simple-orders", response_model=list[SimpleOrderEntityResponse])
async def simple_orders_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[OrderSearch, Depends()],
) -> list[SimpleOrderEntityResponse]:
    """v1. 엔티티 형태 노출 — 쿼리 1 + N + N번.

    Entity-shaped payload. Orders carry no back-references, so serialising
    them cannot loop.
    """
    return await order_query_service.simple_orders_v1(db, search)


@router.get("/v2/simple-orders", response_model=list[SimpleOrderDto])
async def simple_orders_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[OrderSearch, Depends()],
) -> list[SimpleOrderDto]:
    """v2. 엔티티를 DTO로 변환 — 쿼리 1 + N + N번."""
    return await order_query_service.simple_orders_v2(db, search)


@router.get("/v3/simple-orders", response_model=list[SimpleOrderDto])
async def simple_orders_v3(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[OrderSearch, Depends()],
) -> list[SimpleOrderDto]:
    """v3. 엔티티를 DTO로 변환 + 페치 조인 — 쿼리 1번."""
    return await order_query_service.simple_orders_v3(db, search)


@router.get("/v4/simple-orders", response_model=list[OrderSimpleQueryDto])
async def simple_orders_v4(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[OrderSearch, Depends()],
) -> list[OrderSimpleQueryDto]:
    """v4. DTO 직접 조회 — 쿼리 1번, SELECT 절 최소화."""
    return await order_query_service.simple_orders_v4(db, search)
