"""주문 관련 Pydantic 요청/응답 스키마 정의.

Order Pydantic request/response schema definitions.

Three families of response shapes are defined here:
    - 엔티티 형태 (Entity-shaped): mirrors the ORM entities field by field,
      built with ``from_attributes`` from fully loaded aggregates.
    - 엔티티 → DTO (Entity-mapped DTOs): SimpleOrderDto / OrderDto, filled
      from loaded entities by the service layer.
    - 직접 조회 DTO (Projection DTOs): built straight from selected columns
      by the query repositories, see ``app.schemas.order_query``.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.delivery import DeliveryStatus
from app.models.order import OrderStatus
from app.schemas.common import AddressSchema
from app.schemas.member import MemberEntityResponse


# === 검색 / 명령 (Search and command) 스키마 ===

class OrderSearch(BaseModel):
    """주문 검색 조건 — 둘 다 선택 사항.

    Order search filters; both are optional and blank values are ignored.

    Attributes:
        member_name: 회원 이름 부분 일치 (Member name, partial match)
        order_status: 주문 상태 일치 (Exact order status)
    """

    member_name: str | None = None
    order_status: OrderStatus | None = None


class OrderCreate(BaseModel):
    """주문 생성 요청 스키마.

    Order placement request schema.

    Attributes:
        member_id: 주문 회원 ID (Ordering member id)
        item_id: 상품 ID (Item id)
        count: 주문 수량 (Quantity, >= 1)
    """

    member_id: int
    item_id: int
    count: int = Field(ge=1)


class OrderCreateResponse(BaseModel):
    """주문 생성 응답 (New order id)."""

    order_id: int


class OrderCancelResponse(BaseModel):
    """주문 취소 응답 (Canceled order id and status)."""

    order_id: int
    status: OrderStatus


# === 엔티티 형태 (Entity-shaped) 스키마 ===

class ItemEntityResponse(BaseModel):
    """상품 엔티티 형태 (Item entity fields)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: int
    stock_quantity: int


class OrderItemEntityResponse(BaseModel):
    """주문 상품 엔티티 형태 — 주문으로의 역참조 없음 (No back-reference to the order)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    item: ItemEntityResponse
    order_price: int
    count: int
    total_price: int


class DeliveryEntityResponse(BaseModel):
    """배송 엔티티 형태 (Delivery entity fields)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    address: AddressSchema | None = None
    status: DeliveryStatus


class SimpleOrderEntityResponse(BaseModel):
    """주문 엔티티 형태 — xToOne 연관만 포함 (To-one associations only)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    member: MemberEntityResponse
    delivery: DeliveryEntityResponse
    order_date: datetime
    status: OrderStatus


class OrderEntityResponse(SimpleOrderEntityResponse):
    """주문 엔티티 형태 — 주문 상품 컬렉션 포함 (Including the line collection)."""

    order_items: list[OrderItemEntityResponse]
    total_price: int


# === 엔티티 → DTO (Entity-mapped DTO) 스키마 ===

class SimpleOrderDto(BaseModel):
    """간단 주문 DTO — 회원 이름과 배송지만 포함.

    Simple order DTO with only the to-one data the list screen needs.

    Attributes:
        order_id: 주문 ID (Order id)
        name: 회원 이름 (Member name)
        order_date: 주문 일시 (Order timestamp)
        order_status: 주문 상태 (Order status)
        address: 배송지 (Delivery address)
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressSchema | None = None


class OrderItemDto(BaseModel):
    """주문 상품 DTO (Order line DTO: item name, price, count)."""

    item_name: str
    order_price: int
    count: int


class OrderDto(SimpleOrderDto):
    """주문 DTO — 주문 상품 목록 포함 (Order DTO including its lines)."""

    order_items: list[OrderItemDto]
