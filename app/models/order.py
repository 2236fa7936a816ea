"""주문 관련 SQLAlchemy ORM 모델 정의.

Order-related SQLAlchemy ORM model definitions.
Order is the aggregate root: it owns its order lines and its delivery.
Ownership is one-directional — OrderItem keeps only the ``order_id`` column,
never an object reference back to its order, and Member keeps no order list.

Tables:
    - orders: 주문 (Orders)
    - order_items: 주문 상품 (Order lines)
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.delivery import Delivery, DeliveryStatus
from app.models.item import Item
from app.models.member import Member
from app.utils.exceptions import BadRequestError


class OrderStatus(str, enum.Enum):
    """주문 상태 (Order status). CANCELED는 종료 상태 (terminal)."""

    ORDERED = "ORDERED"
    CANCELED = "CANCELED"


class OrderItem(Base):
    """주문 상품 모델 — 주문 한 줄 (상품, 주문 가격, 수량).

    Order line model — One line of an order.
    Create through ``OrderItem.create_order_item`` so that the referenced
    item's stock is decremented together with the line.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        order_id: 소속 주문 FK (Owning order id, column only)
        item_id: 상품 FK (Ordered item id)
        order_price: 주문 당시 가격 (Unit price at order time)
        count: 주문 수량 (Ordered quantity)

    Relationships:
        item: 주문한 상품 (Ordered item, many-to-one)
    """

    __tablename__ = "order_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    item_id: Mapped[int] = mapped_column(Integer, ForeignKey("items.id"), nullable=False)
    order_price: Mapped[int] = mapped_column(Integer, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False)

    item: Mapped[Item] = relationship(Item)

    # == 생성 메서드 == #

    @classmethod
    def create_order_item(cls, item: Item, order_price: int, count: int) -> "OrderItem":
        """주문 상품을 생성하고 상품 재고를 차감합니다.

        Create an order line and remove ``count`` units from the item's stock.

        Raises:
            OutOfStockError: 재고가 부족할 때 — 재고는 변경되지 않음
                             (Insufficient stock; the stock is left unchanged)
        """
        item.remove_stock(count)
        return cls(item=item, order_price=order_price, count=count)

    # == 비즈니스 로직 == #

    def cancel(self) -> None:
        """주문 수량만큼 상품 재고를 원복합니다 (Restore the item's stock)."""
        self.item.add_stock(self.count)

    # == 조회 로직 == #

    @property
    def total_price(self) -> int:
        """주문상품 전체 가격 (Line total = order_price * count)."""
        return self.order_price * self.count


class Order(Base):
    """주문 모델 — 회원, 배송, 주문 상품을 묶는 애그리거트 루트.

    Order model — Aggregate root linking one member, one delivery and its lines.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        member_id: 주문 회원 FK (Ordering member)
        delivery_id: 배송 FK (Owned delivery, 1:1)
        order_date: 주문 일시 UTC (Order timestamp)
        status: 주문 상태 (ORDERED or CANCELED)

    Relationships:
        member: 주문 회원 (Ordering member)
        delivery: 배송 정보 (Owned delivery, cascade all)
        order_items: 주문 상품 목록 (Owned lines ordered by id, cascade delete-orphan)
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("members.id"), nullable=False)
    delivery_id: Mapped[int] = mapped_column(Integer, ForeignKey("deliveries.id"), nullable=False, unique=True)
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, native_enum=False, length=20),
        nullable=False,
        default=OrderStatus.ORDERED,
    )

    member: Mapped[Member] = relationship(Member)
    delivery: Mapped[Delivery] = relationship(Delivery, cascade="all")
    order_items: Mapped[list[OrderItem]] = relationship(
        OrderItem,
        cascade="all, delete-orphan",
        order_by=OrderItem.id,
    )

    # == 생성 메서드 == #

    @classmethod
    def create_order(cls, member: Member, delivery: Delivery, *order_items: OrderItem) -> "Order":
        """주문 애그리거트를 생성합니다 (Build a new ORDERED order aggregate)."""
        order = cls(
            member=member,
            delivery=delivery,
            status=OrderStatus.ORDERED,
            order_date=datetime.now(timezone.utc),
        )
        for order_item in order_items:
            order.add_order_item(order_item)
        return order

    def add_order_item(self, order_item: OrderItem) -> None:
        self.order_items.append(order_item)

    # == 비즈니스 로직 == #

    def cancel(self) -> None:
        """주문을 취소하고 각 주문 상품의 재고를 원복합니다.

        Cancel the order and restore every line's stock.
        Requires ``delivery`` and ``order_items`` (with items) to be loaded.

        Raises:
            BadRequestError: 이미 배송 완료되었거나 이미 취소된 주문
                             (Already delivered, or already canceled)
        """
        if self.delivery.status == DeliveryStatus.COMP:
            raise BadRequestError("Delivered orders cannot be canceled")
        if self.status == OrderStatus.CANCELED:
            raise BadRequestError("Order is already canceled")

        self.status = OrderStatus.CANCELED
        for order_item in self.order_items:
            order_item.cancel()

    # == 조회 로직 == #

    @property
    def total_price(self) -> int:
        """전체 주문 가격 (Sum of line totals)."""
        return sum(order_item.total_price for order_item in self.order_items)
