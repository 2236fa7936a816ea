"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for ``create_all`` and
relationship resolution.

Modules:
    address: 주소 값 객체 (Address value object)
    member: 회원 (Member)
    item: 상품 — 도서, 앨범, 영화 (Item with Book, Album, Movie subtypes)
    delivery: 배송 및 배송 상태 (Delivery and DeliveryStatus)
    order: 주문, 주문 상품, 주문 상태 (Order, OrderItem, OrderStatus)
"""

from app.models.address import Address
from app.models.member import Member
from app.models.item import Item, Book, Album, Movie
from app.models.delivery import Delivery, DeliveryStatus
from app.models.order import Order, OrderItem, OrderStatus

__all__ = [
    "Address",
    "Member",
    "Item", "Book", "Album", "Movie",
    "Delivery", "DeliveryStatus",
    "Order", "OrderItem", "OrderStatus",
]
