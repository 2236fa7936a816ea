"""상품 관련 Pydantic 요청/응답 스키마 정의.

Item Pydantic request/response schema definitions.
A single flat schema covers all item kinds; subtype fields that do not apply
to the chosen ``item_type`` are ignored on create and returned as null.
"""

from typing import Literal

from pydantic import BaseModel, Field

# 상품 종류 — API-level item kind names
ItemType = Literal["book", "album", "movie"]


class ItemCreate(BaseModel):
    """상품 등록 요청 스키마.

    Item creation request schema.

    Attributes:
        item_type: 상품 종류 (book / album / movie, default: book)
        name: 상품명 (Item name)
        price: 가격 (Unit price, >= 0)
        stock_quantity: 재고 수량 (Initial stock, >= 0)
        author, isbn: 도서 전용 (Book only)
        artist, etc: 앨범 전용 (Album only)
        director, actor: 영화 전용 (Movie only)
    """

    item_type: ItemType = "book"
    name: str = Field(min_length=1)
    price: int = Field(ge=0)
    stock_quantity: int = Field(ge=0)
    author: str | None = None
    isbn: str | None = None
    artist: str | None = None
    etc: str | None = None
    director: str | None = None
    actor: str | None = None


class ItemUpdate(BaseModel):
    """상품 수정 요청 스키마 (부분 업데이트).

    Item update request schema (partial update). Only fields that are sent
    are applied; subtype fields are applied only when the item has them.
    """

    name: str | None = Field(default=None, min_length=1)
    price: int | None = Field(default=None, ge=0)
    stock_quantity: int | None = Field(default=None, ge=0)
    author: str | None = None
    isbn: str | None = None
    artist: str | None = None
    etc: str | None = None
    director: str | None = None
    actor: str | None = None


class ItemResponse(BaseModel):
    """상품 응답 스키마 (Item response)."""

    id: int
    item_type: ItemType
    name: str
    price: int
    stock_quantity: int
    author: str | None = None
    isbn: str | None = None
    artist: str | None = None
    etc: str | None = None
    director: str | None = None
    actor: str | None = None
