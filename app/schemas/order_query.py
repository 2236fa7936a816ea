"""주문 직접 조회 DTO — SELECT 절의 컬럼으로 바로 생성되는 응답 모델.

Projection DTOs for order reads. These are built directly from the columns
selected by the query repositories; no entity is ever materialised for them.
Field names match the entity-mapped DTOs so both read paths render the same JSON.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.order import OrderStatus
from app.schemas.common import AddressSchema


class OrderSimpleQueryDto(BaseModel):
    """간단 주문 조회 DTO — 주문 + 회원 이름 + 배송지 (One row per order)."""

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressSchema | None = None


class OrderItemQueryDto(BaseModel):
    """주문 상품 조회 DTO.

    Order line projection. ``order_id`` is used only to group lines under
    their order and is excluded from the JSON output.
    """

    order_id: int = Field(exclude=True)
    item_name: str
    order_price: int
    count: int


class OrderQueryDto(OrderSimpleQueryDto):
    """주문 조회 DTO — 주문 상품은 별도 쿼리로 채움 (Lines attached by a second query)."""

    order_items: list[OrderItemQueryDto] = []
