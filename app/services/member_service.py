"""회원 서비스 — 회원 가입, 조회, 수정 비즈니스 로직.

Member Service — Business logic for joining, listing and updating members.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.address import Address
from app.models.member import Member
from app.repositories.member_repository import member_repository
from app.schemas.common import AddressSchema, Result
from app.schemas.member import (
    MemberCreate,
    MemberDetailResponse,
    MemberDto,
    MemberEntityResponse,
    UpdateMemberResponse,
)
from app.utils.exceptions import ConflictError, DuplicateError, NotFoundError
from app.utils.logging import get_logger

logger = get_logger(__name__)


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member business logic.
    """

    async def _validate_duplicate_member(self, db: AsyncSession, name: str) -> None:
        """같은 이름의 회원이 있으면 거부합니다 (Reject a taken member name)."""
        if await member_repository.exists(db, {"name": name}):
            raise DuplicateError("Member already exists")

    async def join(self, db: AsyncSession, data: MemberCreate) -> int:
        """회원 가입.

        Join a new member.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 가입 요청 데이터 (Join request data)

        Returns:
            int: 새 회원 ID (New member id)

        Raises:
            DuplicateError: 같은 이름의 회원이 이미 존재할 때 (Name already taken)
        """
        await self._validate_duplicate_member(db, data.name)

        member = Member(
            name=data.name,
            address=Address(city=data.city, street=data.street, zipcode=data.zipcode),
        )
        await member_repository.create(db, member)
        logger.info("member_joined", member_id=member.id)
        return member.id

    async def find_one(self, db: AsyncSession, member_id: int) -> Member:
        """회원 한 명을 조회합니다.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        member: Member | None = await member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")
        return member

    async def list_member_entities(self, db: AsyncSession) -> list[MemberEntityResponse]:
        """회원 엔티티 형태 목록 (Entity-shaped member list)."""
        members: list[Member] = await member_repository.find_all(db)
        return [MemberEntityResponse.model_validate(m) for m in members]

    async def list_members(self, db: AsyncSession) -> Result[MemberDto]:
        """회원 이름 목록을 Result로 감싸 반환합니다 (Names wrapped in Result)."""
        members: list[Member] = await member_repository.find_all(db)
        data: list[MemberDto] = [MemberDto(name=m.name) for m in members]
        return Result[MemberDto](count=len(data), data=data)

    async def get_detail(self, db: AsyncSession, member_id: int) -> MemberDetailResponse:
        """회원 상세 정보를 주문 ID 목록과 함께 조회합니다.

        Member detail with the ids of the member's orders.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        member: Member = await self.find_one(db, member_id)
        order_ids: list[int] = await member_repository.find_order_ids(db, member_id)
        return MemberDetailResponse(
            id=member.id,
            name=member.name,
            address=AddressSchema.from_address(member.address),
            order_ids=order_ids,
        )

    async def update(self, db: AsyncSession, member_id: int, name: str) -> UpdateMemberResponse:
        """회원 이름을 수정합니다.

        Rename a member and write it with an explicit update.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
            DuplicateError: 다른 회원이 이미 그 이름을 쓸 때 (Name taken by another member)
            ConflictError: 반영되지 않았을 때 (Row not written)
        """
        member: Member = await self.find_one(db, member_id)
        if member.name != name:
            await self._validate_duplicate_member(db, name)

        member.name = name
        if not await member_repository.update(db, member):
            raise ConflictError("Member was modified concurrently")
        return UpdateMemberResponse(id=member.id, name=member.name)


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
