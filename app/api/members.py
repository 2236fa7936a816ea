"""회원 라우터 — 회원 가입, 수정, 조회 엔드포인트.

Member Router — Join, update and list endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.common import Result
from app.schemas.member import (
    CreateMemberResponse,
    MemberCreate,
    MemberDetailResponse,
    MemberDto,
    MemberEntityResponse,
    MemberUpdate,
    UpdateMemberResponse,
)
from app.services.member_service import member_service

router: APIRouter = APIRouter()


@router.get("/v1/members", response_model=list[MemberEntityResponse])
async def members_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[MemberEntityResponse]:
    """회원 목록 — 엔티티 형태 그대로 (Entity-shaped member list)."""
    return await member_service.list_member_entities(db)


@router.get("/v2/members", response_model=Result[MemberDto])
async def members_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Result[MemberDto]:
    """회원 목록 — 이름만, Result로 감싸서 반환 (Names wrapped in Result)."""
    return await member_service.list_members(db)


@router.get("/v2/members/{member_id}", response_model=MemberDetailResponse)
async def get_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberDetailResponse:
    """회원 상세 — 주문 ID 목록 포함 (Member detail with order ids)."""
    return await member_service.get_detail(db, member_id)


@router.post("/v2/members", response_model=CreateMemberResponse, status_code=201)
async def create_member(
    data: MemberCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CreateMemberResponse:
    """회원 가입 (Join). 409 when the name is taken."""
    member_id: int = await member_service.join(db, data)
    await db.commit()
    return CreateMemberResponse(id=member_id)


@router.put("/v2/members/{member_id}", response_model=UpdateMemberResponse)
async def update_member(
    member_id: int,
    data: MemberUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UpdateMemberResponse:
    """회원 이름 수정 (Rename a member)."""
    result: UpdateMemberResponse = await member_service.update(db, member_id, data.name)
    await db.commit()
    return result
