"""주문 서비스 테스트.

Order service tests — Placement, stock bookkeeping, cancellation and the
error paths, exercised against the database session directly.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models import Address, Book, DeliveryStatus, Item, Member, Order, OrderStatus
from app.repositories.item_repository import item_repository
from app.repositories.order_repository import order_repository
from app.services.order_service import order_service
from app.utils.exceptions import BadRequestError, ConflictError, NotFoundError, OutOfStockError


async def _reload_item(db: AsyncSession, item_id: int) -> Item:
    db.expunge_all()
    item = await db.get(Item, item_id)
    assert item is not None
    return item


class TestPlaceOrder:
    """주문 생성 테스트."""

    async def test_order_reduces_stock(self, db: AsyncSession, member, books):
        """JPA 1권, Spring boot 2권 주문 → 재고 1999, 198."""
        order_id_1 = await order_service.order(db, member.id, books["jpa"].id, 1)
        order_id_2 = await order_service.order(db, member.id, books["spring"].id, 2)
        await db.commit()

        assert order_id_1 != order_id_2
        assert (await _reload_item(db, books["jpa"].id)).stock_quantity == 1999
        assert (await _reload_item(db, books["spring"].id)).stock_quantity == 198

    async def test_order_fields(self, db: AsyncSession, member, books):
        """주문 상태 ORDERED, 배송 READY, 배송지 = 회원 주소, 주문 가격 = 상품 가격."""
        order_id = await order_service.order(db, member.id, books["spring"].id, 2)
        await db.commit()
        db.expunge_all()

        order = await order_repository.get_with_lines(db, order_id)
        assert order is not None
        assert order.status == OrderStatus.ORDERED
        assert order.delivery.status == DeliveryStatus.READY
        assert order.delivery.address.city == "서울"
        assert order.delivery.address.zipcode == "123-123"
        assert order.member.name == "회원1"
        assert len(order.order_items) == 1
        assert order.order_items[0].order_price == 40000
        assert order.order_items[0].count == 2
        assert order.total_price == 80000

    async def test_order_out_of_stock(self, db: AsyncSession, member, create_book):
        """재고 초과 주문 시 OutOfStockError, 재고와 주문 모두 변경 없음."""
        book = await create_book("JPA", 10000, 10)
        book_id = book.id
        await db.commit()

        with pytest.raises(OutOfStockError):
            await order_service.order(db, member.id, book_id, 11)
        await db.rollback()

        assert (await _reload_item(db, book_id)).stock_quantity == 10
        assert await order_repository.get_all(db) == []

    async def test_order_exact_stock(self, db: AsyncSession, member, create_book):
        """재고와 같은 수량은 주문 가능 — 재고 0."""
        book = await create_book("JPA", 10000, 10)
        await db.commit()

        await order_service.order(db, member.id, book.id, 10)
        await db.commit()

        assert (await _reload_item(db, book.id)).stock_quantity == 0

    async def test_order_non_positive_count(self, db: AsyncSession, member, books):
        """음수 수량 주문 시 BadRequestError, 재고가 늘어나지 않고 주문도 없음."""
        member_id, book_id = member.id, books["jpa"].id

        with pytest.raises(BadRequestError):
            await order_service.order(db, member_id, book_id, -5)
        await db.rollback()

        assert (await _reload_item(db, book_id)).stock_quantity == 2000
        assert await order_repository.get_all(db) == []

    async def test_order_unknown_member(self, db: AsyncSession, books):
        with pytest.raises(NotFoundError):
            await order_service.order(db, 9999, books["jpa"].id, 1)

    async def test_order_unknown_item(self, db: AsyncSession, member):
        with pytest.raises(NotFoundError):
            await order_service.order(db, member.id, 9999, 1)


class TestCancelOrder:
    """주문 취소 테스트."""

    async def test_cancel_restores_stock(self, db: AsyncSession, member, create_book):
        book = await create_book("JPA", 10000, 10)
        await db.commit()
        order_id = await order_service.order(db, member.id, book.id, 2)
        await db.commit()
        assert (await _reload_item(db, book.id)).stock_quantity == 8

        result = await order_service.cancel_order(db, order_id)
        await db.commit()

        assert result.order_id == order_id
        assert result.status == OrderStatus.CANCELED
        assert (await _reload_item(db, book.id)).stock_quantity == 10
        order = await db.get(Order, order_id)
        assert order.status == OrderStatus.CANCELED

    async def test_cancel_twice_rejected(self, db: AsyncSession, member, books):
        """이미 취소된 주문 재취소 시 400, 재고는 한 번만 복구."""
        book_id = books["jpa"].id
        order_id = await order_service.order(db, member.id, book_id, 5)
        await db.commit()
        await order_service.cancel_order(db, order_id)
        await db.commit()

        with pytest.raises(BadRequestError):
            await order_service.cancel_order(db, order_id)
        await db.rollback()

        assert (await _reload_item(db, book_id)).stock_quantity == 2000

    async def test_cancel_delivered_rejected(self, db: AsyncSession, member, books):
        """배송 완료(COMP) 주문은 취소 불가."""
        book_id = books["jpa"].id
        order_id = await order_service.order(db, member.id, book_id, 5)
        await db.commit()
        order = await order_repository.get_with_lines(db, order_id)
        order.delivery.status = DeliveryStatus.COMP
        await db.commit()

        with pytest.raises(BadRequestError):
            await order_service.cancel_order(db, order_id)
        await db.rollback()

        assert (await _reload_item(db, book_id)).stock_quantity == 1995

    async def test_cancel_unknown_order(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await order_service.cancel_order(db, 9999)


async def _seed_member_and_book(
    session_factory: async_sessionmaker[AsyncSession],
    stock_quantity: int,
) -> tuple[int, int]:
    async with session_factory() as s:
        member = Member(name="회원1", address=Address(city="서울", street="강가", zipcode="123-123"))
        book = Book(name="JPA", price=10000, stock_quantity=stock_quantity)
        s.add_all([member, book])
        await s.commit()
        return member.id, book.id


class TestConcurrentStock:
    """동시 재고 변경 테스트 — 세션 두 개, 커넥션 두 개."""

    async def test_stale_item_update_returns_false(
        self,
        file_session_factory: async_sessionmaker[AsyncSession],
    ):
        """다른 트랜잭션이 먼저 커밋하면 오래된 버전의 UPDATE는 반영되지 않음."""
        _, book_id = await _seed_member_and_book(file_session_factory, 10)

        async with file_session_factory() as first, file_session_factory() as second:
            stale = await item_repository.get_for_update(first, book_id)

            fresh = await second.get(Item, book_id)
            fresh.remove_stock(3)
            assert await item_repository.update(second, fresh) is True
            await second.commit()

            stale.remove_stock(2)
            assert await item_repository.update(first, stale) is False
            await first.rollback()

        async with file_session_factory() as s:
            item = await s.get(Item, book_id)
            assert item.stock_quantity == 7
            assert item.version == 2

    async def test_order_conflicts_with_competing_commit(
        self,
        file_session_factory: async_sessionmaker[AsyncSession],
        monkeypatch,
    ):
        """상품 조회 직후 다른 주문이 재고를 커밋하면 ConflictError, 주문은 생성되지 않음."""
        member_id, book_id = await _seed_member_and_book(file_session_factory, 10)
        locked_get = item_repository.get_for_update

        async def _get_then_competing_commit(db: AsyncSession, item_id: int) -> Item | None:
            item = await locked_get(db, item_id)
            async with file_session_factory() as other:
                competing = await other.get(Item, item_id)
                competing.remove_stock(3)
                await other.commit()
            return item

        monkeypatch.setattr(item_repository, "get_for_update", _get_then_competing_commit)

        async with file_session_factory() as db:
            with pytest.raises(ConflictError) as exc:
                await order_service.order(db, member_id, book_id, 2)
            assert exc.value.status_code == 409
            await db.rollback()

        async with file_session_factory() as s:
            assert (await s.get(Item, book_id)).stock_quantity == 7
            assert await order_repository.get_all(s) == []
