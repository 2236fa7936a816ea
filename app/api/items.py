"""상품 라우터 — 상품 등록, 수정, 조회 엔드포인트.

Item Router — Register, update and read items.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from app.services.item_service import item_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[ItemResponse])
async def list_items(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ItemResponse]:
    """상품 목록을 조회합니다 (List all items)."""
    return await item_service.find_items(db)


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemResponse:
    """상품 상세를 조회합니다 (Item detail)."""
    return await item_service.get_item(db, item_id)


@router.post("", response_model=ItemResponse, status_code=201)
async def create_item(
    data: ItemCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemResponse:
    """새 상품을 등록합니다 (Register a book, album or movie)."""
    result: ItemResponse = await item_service.save_item(db, data)
    await db.commit()
    return result


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(
    item_id: int,
    data: ItemUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemResponse:
    """상품 정보를 수정합니다 (Partial update, written explicitly)."""
    result: ItemResponse = await item_service.update_item(db, item_id, data)
    await db.commit()
    return result
