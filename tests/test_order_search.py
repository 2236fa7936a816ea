"""주문 검색 테스트.

Order search tests — Member name and status filters, applied identically by
the search endpoint and every list strategy.
"""

import pytest
from httpx import AsyncClient

from app.config import settings

LIST_URLS = (
    "/api/orders",
    "/api/v1/simple-orders",
    "/api/v2/simple-orders",
    "/api/v3/simple-orders",
    "/api/v4/simple-orders",
    "/api/v1/orders",
    "/api/v2/orders",
    "/api/v3/orders",
    "/api/v3.1/orders",
    "/api/v4/orders",
    "/api/v5/orders",
)


def _ids(data: list[dict]) -> list[int]:
    return [o.get("order_id", o.get("id")) for o in data]


class TestOrderSearch:
    """검색 조건 테스트."""

    async def test_no_filter(self, client: AsyncClient, sample_orders):
        res = await client.get("/api/orders")
        assert res.status_code == 200
        assert _ids(res.json()) == sample_orders

    async def test_member_name_partial_match(self, client: AsyncClient, sample_orders):
        """회원 이름 부분 일치."""
        res = await client.get("/api/orders", params={"member_name": "B"})
        assert _ids(res.json()) == sample_orders[1:]

        res = await client.get("/api/orders", params={"member_name": "user"})
        assert _ids(res.json()) == sample_orders

        res = await client.get("/api/orders", params={"member_name": "nobody"})
        assert res.json() == []

    async def test_blank_member_name_ignored(self, client: AsyncClient, sample_orders):
        res = await client.get("/api/orders", params={"member_name": "  "})
        assert _ids(res.json()) == sample_orders

    async def test_status_filter(self, client: AsyncClient, sample_orders):
        await client.post(f"/api/orders/{sample_orders[0]}/cancel")

        res = await client.get("/api/orders", params={"order_status": "CANCELED"})
        data = res.json()
        assert _ids(data) == sample_orders[:1]
        assert data[0]["order_status"] == "CANCELED"

        res = await client.get("/api/orders", params={"order_status": "ORDERED"})
        assert _ids(res.json()) == sample_orders[1:]

    async def test_both_filters(self, client: AsyncClient, sample_orders):
        await client.post(f"/api/orders/{sample_orders[0]}/cancel")

        res = await client.get("/api/orders", params={"member_name": "A", "order_status": "ORDERED"})
        assert res.json() == []

        res = await client.get("/api/orders", params={"member_name": "A", "order_status": "CANCELED"})
        assert _ids(res.json()) == sample_orders[:1]

    async def test_invalid_status(self, client: AsyncClient):
        res = await client.get("/api/orders", params={"order_status": "SHIPPED"})
        assert res.status_code == 422

    @pytest.mark.parametrize("url", LIST_URLS)
    async def test_every_list_applies_filter(self, client: AsyncClient, sample_orders, url):
        """모든 목록 엔드포인트가 같은 검색 조건을 적용."""
        res = await client.get(url, params={"member_name": "userB"})
        assert res.status_code == 200
        assert _ids(res.json()) == sample_orders[1:]

    @pytest.mark.parametrize("url", LIST_URLS)
    async def test_result_cap(self, client: AsyncClient, sample_orders, monkeypatch, url):
        """모든 목록 결과는 ORDER_SEARCH_MAX_RESULTS건으로 제한."""
        monkeypatch.setattr(settings, "ORDER_SEARCH_MAX_RESULTS", 1)
        res = await client.get(url)
        assert res.status_code == 200
        assert _ids(res.json()) == sample_orders[:1]

    async def test_paged_limit_above_cap(self, client: AsyncClient, sample_orders, monkeypatch):
        """v3.1 limit이 상한보다 커도 상한까지만 반환."""
        monkeypatch.setattr(settings, "ORDER_SEARCH_MAX_RESULTS", 1)
        res = await client.get("/api/v3.1/orders", params={"offset": 0, "limit": 50})
        assert _ids(res.json()) == sample_orders[:1]

    @pytest.mark.parametrize("pattern", ["_", "%", "user_", "%A"])
    async def test_wildcards_match_literally(self, client: AsyncClient, sample_orders, pattern):
        """이름 검색어의 '%', '_' 는 와일드카드가 아닌 문자로 취급."""
        for url in LIST_URLS:
            res = await client.get(url, params={"member_name": pattern})
            assert res.status_code == 200, url
            assert res.json() == [], url
