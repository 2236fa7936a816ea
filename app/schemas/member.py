"""회원 관련 Pydantic 요청/응답 스키마 정의.

Member Pydantic request/response schema definitions.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import AddressSchema


class MemberCreate(BaseModel):
    """회원 가입 요청 스키마.

    Member join request schema.

    Attributes:
        name: 회원 이름 (Member name, required)
        city: 도시 (City, optional)
        street: 거리 (Street, optional)
        zipcode: 우편번호 (Zip code, optional)
    """

    name: str = Field(min_length=1)  # 회원 이름 (Member name)
    city: str | None = None
    street: str | None = None
    zipcode: str | None = None


class MemberUpdate(BaseModel):
    """회원 수정 요청 스키마 (Member update request)."""

    name: str = Field(min_length=1)  # 변경할 이름 (New name)


class CreateMemberResponse(BaseModel):
    """회원 가입 응답 (Join response carrying the new id)."""

    id: int


class UpdateMemberResponse(BaseModel):
    """회원 수정 응답 (Update response)."""

    id: int
    name: str


class MemberDto(BaseModel):
    """회원 목록용 DTO — API에 필요한 필드만 노출 (Only the fields the list needs)."""

    name: str


class MemberEntityResponse(BaseModel):
    """회원 엔티티 형태 응답 — 엔티티 필드를 그대로 노출.

    Entity-shaped member payload. Carries no order collection.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: AddressSchema | None = None


class MemberDetailResponse(MemberEntityResponse):
    """회원 상세 응답 — 주문 ID 조회 인덱스 포함.

    Member detail response including the ids of the member's orders,
    resolved through a separate read-only lookup query.

    Attributes:
        order_ids: 회원의 주문 ID 목록, 오름차순 (Order ids, ascending)
    """

    order_ids: list[int] = []
