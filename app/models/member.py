"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.
The member does not hold a back-reference collection of orders; the
member → order ids lookup lives in MemberRepository.find_order_ids.

Tables:
    - members: 회원 (Shop members)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column

from app.database import Base
from app.models.address import Address


class Member(Base):
    """회원 모델 — 주문을 하는 고객.

    Member model — A customer who places orders.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        name: 회원 이름 (Member name, unique at the service level)
        address: 주소 값 객체 (Embedded address: city/street/zipcode columns)
    """

    __tablename__ = "members"

    # 회원 고유 식별자 — Member identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 회원 이름 — Member display name (required)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # 주소 컬럼 — Address columns backing the composite below
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[Address] = composite("city", "street", "zipcode")
