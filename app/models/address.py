"""주소 값 타입 — 회원과 배송이 공유하는 임베디드 값 객체.

Address value type embedded into members and deliveries via ``composite()``.
"""

from dataclasses import dataclass


@dataclass
class Address:
    """주소 값 객체 (Immutable-by-convention address value object).

    Attributes:
        city: 도시 (City)
        street: 거리 (Street)
        zipcode: 우편번호 (Zip code)
    """

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None
