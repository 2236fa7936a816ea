"""배송 SQLAlchemy ORM 모델 정의.

Delivery SQLAlchemy ORM model definition.
A delivery is owned 1:1 by an order and carries the shipping address.

Tables:
    - deliveries: 배송 (Shipping records)
"""

import enum

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column

from app.database import Base
from app.models.address import Address


class DeliveryStatus(str, enum.Enum):
    """배송 상태 (Delivery status): READY=준비, COMP=배송 완료."""

    READY = "READY"
    COMP = "COMP"


class Delivery(Base):
    """배송 모델 — 주문 한 건의 배송 정보.

    Delivery model — Shipping information for exactly one order.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        address: 배송 주소 (Embedded shipping address)
        status: 배송 상태 (READY or COMP)
    """

    __tablename__ = "deliveries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # 배송지 컬럼 — Address columns backing the composite below
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[Address] = composite("city", "street", "zipcode")

    # 배송 상태 — Delivery status stored as its name (no native DB enum)
    status: Mapped[DeliveryStatus] = mapped_column(
        Enum(DeliveryStatus, native_enum=False, length=20),
        nullable=False,
        default=DeliveryStatus.READY,
    )
