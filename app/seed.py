"""초기 데이터 시드 스크립트 — 회원, 도서, 주문 샘플 생성.

Seed script — Creates sample members, books and orders so every order list
endpoint has something to show.

Usage:
    python -m app.seed

Creates:
    - userA (서울): JPA1 BOOK x1, JPA2 BOOK x2 주문 1건 (one order, two lines)
    - userB (부산): SPRING1 BOOK x3, SPRING2 BOOK x4 주문 1건 (one order, two lines)
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base, async_session, engine
from app.models import Address, Book, Delivery, DeliveryStatus, Member, Order, OrderItem
from app.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

# (이름, 주소, [(도서명, 가격, 재고, 주문 수량)]) — (name, address, [(book, price, stock, count)])
_SAMPLE_ORDERS: list[tuple[str, Address, list[tuple[str, int, int, int]]]] = [
    (
        "userA",
        Address(city="서울", street="1", zipcode="1111"),
        [("JPA1 BOOK", 10000, 100, 1), ("JPA2 BOOK", 20000, 100, 2)],
    ),
    (
        "userB",
        Address(city="부산", street="2", zipcode="2222"),
        [("SPRING1 BOOK", 20000, 200, 3), ("SPRING2 BOOK", 40000, 300, 4)],
    ),
]


async def seed_member_order(
    db: AsyncSession,
    name: str,
    address: Address,
    books: list[tuple[str, int, int, int]],
) -> Order:
    """회원 1명, 도서 여러 권, 주문 1건을 생성합니다 (One member, their books, one order)."""
    member = Member(name=name, address=address)
    db.add(member)

    order_items: list[OrderItem] = []
    for book_name, price, stock_quantity, count in books:
        book = Book(name=book_name, price=price, stock_quantity=stock_quantity)
        db.add(book)
        order_items.append(OrderItem.create_order_item(book, price, count))

    delivery = Delivery(
        address=Address(city=address.city, street=address.street, zipcode=address.zipcode),
        status=DeliveryStatus.READY,
    )
    order = Order.create_order(member, delivery, *order_items)
    db.add(order)
    await db.flush()
    return order


async def seed() -> None:
    """데이터베이스를 샘플 데이터로 시드합니다.

    Seed the database with sample data.
    Creates tables if they don't exist, then inserts the sample members,
    books and orders.

    Idempotent: 회원이 하나라도 있으면 건너뜁니다 (Skips when any member exists).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Member.id).limit(1))
        if result.scalar_one_or_none() is not None:
            logger.info("seed_skipped", reason="already seeded")
            return

        order_ids: list[int] = []
        for name, address, books in _SAMPLE_ORDERS:
            order = await seed_member_order(db, name, address, books)
            order_ids.append(order.id)

        await db.commit()
        logger.info("seed_completed", order_ids=order_ids)


if __name__ == "__main__":
    configure_logging()
    asyncio.run(seed())
