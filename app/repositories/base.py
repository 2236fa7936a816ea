"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic create, read, update and existence-check operations.

Writes are explicit: a modified entity is persisted only by calling
``update(db, entity)``, which flushes it and reports whether the row was
actually written.

Usage:
    class ItemRepository(BaseRepository[Item]):
        def __init__(self) -> None:
            super().__init__(Item)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its id. Relationships are not loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Id of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """모든 레코드를 조회합니다.

        Retrieve all records, ordered by ``order_by`` or by id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_by: 정렬 기준 컬럼 (Column to order by, default: id)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of records)
        """
        query: Select = select(self.model).order_by(
            order_by if order_by is not None else self.model.id
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        entity: ModelType,
    ) -> ModelType:
        """새 엔티티를 저장합니다.

        Persist a new entity (and everything it cascades to) and assign its id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entity: 저장할 엔티티 (Transient entity to persist)

        Returns:
            ModelType: ID가 할당된 엔티티 (The persisted entity with its id)
        """
        db.add(entity)
        await db.flush()
        return entity

    async def update(
        self,
        db: AsyncSession,
        entity: ModelType,
    ) -> bool:
        """수정된 엔티티를 명시적으로 반영합니다.

        Explicitly write a modified entity. For versioned models the UPDATE
        is conditional on the version that was read; if another transaction
        changed the row in between, nothing is written and False is returned.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entity: 수정된 영속 엔티티 (Modified persistent entity)

        Returns:
            bool: 반영 성공 여부 (True if the row was written)
        """
        db.add(entity)
        try:
            await db.flush()
        except StaleDataError:
            return False
        return True

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given filters exists.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 검색 조건 딕셔너리 (Filter criteria dictionary)

        Returns:
            bool: 레코드 존재 여부 (Whether a matching record exists)
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
