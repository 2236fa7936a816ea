"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every endpoint into a single router
for inclusion in the FastAPI application under ``/api``.

Included routers:
    - orders: 주문 목록 조회 전략 v1 ~ v5, 주문/취소/검색 (Order lists, commands, search)
    - simple_orders: 간단 주문 조회 v1 ~ v4 (To-one-only order lists)
    - members: 회원 가입/수정/조회 (Members)
    - items: 상품 등록/수정/조회 (Items)
"""

from fastapi import APIRouter

from app.api.items import router as items_router
from app.api.members import router as members_router
from app.api.orders import router as orders_router
from app.api.simple_orders import router as simple_orders_router

api_router: APIRouter = APIRouter()

api_router.include_router(orders_router, tags=["Orders"])
api_router.include_router(simple_orders_router, tags=["Simple Orders"])
api_router.include_router(members_router, tags=["Members"])
api_router.include_router(items_router, prefix="/items", tags=["Items"])
