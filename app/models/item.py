"""상품 SQLAlchemy ORM 모델 정의 — 단일 테이블 상속.

Item SQLAlchemy ORM model definitions using single-table inheritance.
Book, Album and Movie share the ``items`` table, discriminated by ``dtype``.
The ``version`` column turns every stock UPDATE into a compare-and-set
(``WHERE id = :id AND version = :version``).

Tables:
    - items: 상품 (Items of every kind)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.utils.exceptions import BadRequestError, OutOfStockError


class Item(Base):
    """상품 기본 모델 — 재고를 가진 판매 단위.

    Base item model — A sellable unit with a stock quantity.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        dtype: 상품 종류 구분자 (Discriminator: B=book, A=album, M=movie)
        name: 상품명 (Item name)
        price: 가격 (Unit price)
        stock_quantity: 재고 수량 (Units in stock, never negative)
        version: 낙관적 락 버전 (Optimistic lock counter)
    """

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dtype: Mapped[str] = mapped_column(String(1), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {
        "polymorphic_on": "dtype",
        "polymorphic_identity": "I",
        "version_id_col": version,
    }

    # == 비즈니스 로직 == #

    def add_stock(self, quantity: int) -> None:
        """재고를 증가시킵니다 (Increase stock by quantity).

        Raises:
            BadRequestError: 수량이 0 이하일 때 (Quantity is not positive)
        """
        self._check_quantity(quantity)
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """재고를 감소시킵니다. 부족하면 재고를 건드리지 않고 예외를 발생시킵니다.

        Decrease stock by quantity.

        Raises:
            BadRequestError: 수량이 0 이하일 때 (Quantity is not positive)
            OutOfStockError: 남은 재고가 음수가 될 때 (Remaining stock would be negative)
        """
        self._check_quantity(quantity)
        rest_stock: int = self.stock_quantity - quantity
        if rest_stock < 0:
            raise OutOfStockError(
                f"need more stock: item {self.id} has {self.stock_quantity}, requested {quantity}"
            )
        self.stock_quantity = rest_stock

    @staticmethod
    def _check_quantity(quantity: int) -> None:
        if quantity <= 0:
            raise BadRequestError(f"Quantity must be positive, got {quantity}")


# 하위 타입 — 컬럼은 items 테이블에 nullable로 추가되고, 기본 쿼리에서 함께 로드됨 (inline)
# Subtypes: columns land in the items table as nullable and load inline with base queries


class Book(Item):
    """도서 (Book item)."""

    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    isbn: Mapped[str | None] = mapped_column(String(50), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "B", "polymorphic_load": "inline"}


class Album(Item):
    """앨범 (Album item)."""

    artist: Mapped[str | None] = mapped_column(String(255), nullable=True)
    etc: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "A", "polymorphic_load": "inline"}


class Movie(Item):
    """영화 (Movie item)."""

    director: Mapped[str | None] = mapped_column(String(255), nullable=True)
    actor: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "M", "polymorphic_load": "inline"}
