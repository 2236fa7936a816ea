"""공통 Pydantic 스키마 정의.

Common Pydantic schema definitions shared across API domains:
the embedded address and the generic list wrapper.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from app.models.address import Address

T = TypeVar("T")


class AddressSchema(BaseModel):
    """주소 스키마 — Address value object as JSON.

    Attributes:
        city: 도시 (City)
        street: 거리 (Street)
        zipcode: 우편번호 (Zip code)
    """

    model_config = ConfigDict(from_attributes=True)

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None

    @classmethod
    def from_address(cls, address: Address | None) -> "AddressSchema":
        """주소 값 객체를 스키마로 변환합니다. 주소가 없으면 빈 주소 (Empty when None)."""
        if address is None:
            return cls()
        return cls(city=address.city, street=address.street, zipcode=address.zipcode)


class Result(BaseModel, Generic[T]):
    """목록 응답 래퍼 — 배열을 최상위로 노출하지 않고 객체로 감쌉니다.

    List response wrapper. Wrapping the array in an object keeps room for
    extra top-level fields (e.g. ``count``) without breaking clients.

    Attributes:
        count: 항목 수 (Number of items)
        data: 항목 목록 (Items)
    """

    count: int
    data: list[T]
