"""상품 서비스 — 상품 등록, 수정, 조회 비즈니스 로직.

Item Service — Business logic for registering, updating and reading items.
Updates load the item, change it, and write it back with an explicit
``item_repository.update`` call.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.item import Album, Book, Item, Movie
from app.repositories.item_repository import item_repository
from app.schemas.item import ItemCreate, ItemResponse, ItemType, ItemUpdate
from app.utils.exceptions import ConflictError, NotFoundError
from app.utils.logging import get_logger

logger = get_logger(__name__)

# 상품 종류 → 모델 클래스와 하위 타입 필드 (Item kind → model class and subtype fields)
_ITEM_KINDS: dict[str, tuple[type[Item], tuple[str, ...]]] = {
    "book": (Book, ("author", "isbn")),
    "album": (Album, ("artist", "etc")),
    "movie": (Movie, ("director", "actor")),
}
# 구분자 → 상품 종류 (Discriminator → item kind)
_KIND_BY_DTYPE: dict[str, ItemType] = {"B": "book", "A": "album", "M": "movie"}


class ItemService:
    """상품 관련 비즈니스 로직을 처리하는 서비스.

    Service handling item business logic.
    """

    def _to_response(self, item: Item) -> ItemResponse:
        """상품 모델을 응답 스키마로 변환합니다 (Convert an Item to ItemResponse)."""
        return ItemResponse(
            id=item.id,
            item_type=_KIND_BY_DTYPE[item.dtype],
            name=item.name,
            price=item.price,
            stock_quantity=item.stock_quantity,
            author=getattr(item, "author", None),
            isbn=getattr(item, "isbn", None),
            artist=getattr(item, "artist", None),
            etc=getattr(item, "etc", None),
            director=getattr(item, "director", None),
            actor=getattr(item, "actor", None),
        )

    async def save_item(self, db: AsyncSession, data: ItemCreate) -> ItemResponse:
        """새 상품을 등록합니다.

        Register a new Book, Album or Movie depending on ``item_type``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 상품 등록 데이터 (Item creation data)

        Returns:
            ItemResponse: 등록된 상품 (Created item)
        """
        model, fields = _ITEM_KINDS[data.item_type]
        values: dict[str, Any] = {field: getattr(data, field) for field in fields}
        item: Item = model(
            name=data.name,
            price=data.price,
            stock_quantity=data.stock_quantity,
            **values,
        )
        await item_repository.create(db, item)
        logger.info("item_saved", item_id=item.id, item_type=data.item_type)
        return self._to_response(item)

    async def update_item(self, db: AsyncSession, item_id: int, data: ItemUpdate) -> ItemResponse:
        """상품 정보를 수정합니다.

        Update an item: load it, apply the fields that were sent, and write
        it with an explicit update. Subtype fields apply only to items that
        have them.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            item_id: 상품 ID (Item id)
            data: 수정 데이터 (Update data)

        Returns:
            ItemResponse: 수정된 상품 (Updated item)

        Raises:
            NotFoundError: 상품을 찾을 수 없을 때 (Item not found)
            ConflictError: 다른 트랜잭션이 먼저 수정했을 때 (Stale version)
        """
        item: Item = await self.find_one(db, item_id)

        for field, value in data.model_dump(exclude_unset=True).items():
            if value is not None and hasattr(item, field):
                setattr(item, field, value)

        if not await item_repository.update(db, item):
            raise ConflictError("Item was modified concurrently")
        logger.info("item_updated", item_id=item.id)
        return self._to_response(item)

    async def find_items(self, db: AsyncSession) -> list[ItemResponse]:
        """모든 상품을 조회합니다 (List all items)."""
        items: list[Item] = await item_repository.find_all(db)
        return [self._to_response(i) for i in items]

    async def find_one(self, db: AsyncSession, item_id: int) -> Item:
        """상품 한 건을 조회합니다.

        Raises:
            NotFoundError: 상품을 찾을 수 없을 때 (Item not found)
        """
        item: Item | None = await item_repository.get_by_id(db, item_id)
        if item is None:
            raise NotFoundError("Item not found")
        return item

    async def get_item(self, db: AsyncSession, item_id: int) -> ItemResponse:
        return self._to_response(await self.find_one(db, item_id))


# 싱글턴 인스턴스 — Singleton instance
item_service: ItemService = ItemService()
