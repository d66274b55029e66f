"""Tests for tag, category, friend link, cache and health routes."""

from uuid import uuid4

from httpx import AsyncClient

from inkwell.managers.cache_types import CacheDivision
from inkwell.managers.content_cache import ContentCache


async def test_categories_list_refreshes_after_writes(client: AsyncClient) -> None:
    assert (await client.get("/categories")).json() == []

    created = await client.post("/categories", json={"displayName": "News", "routeName": "news"})
    assert created.status_code == 201
    assert [c["routeName"] for c in (await client.get("/categories")).json()] == ["news"]

    assert (await client.delete(f"/categories/{created.json()['id']}")).status_code == 204
    assert (await client.get("/categories")).json() == []
    assert (await client.delete(f"/categories/{uuid4()}")).status_code == 404


async def test_duplicate_category(client: AsyncClient) -> None:
    body = {"displayName": "News", "routeName": "news"}
    await client.post("/categories", json=body)
    assert (await client.post("/categories", json=body)).status_code == 409


async def test_friend_links(client: AsyncClient, content_cache: ContentCache) -> None:
    created = await client.post("/friendlinks", json={"title": "Alice", "linkUrl": "https://alice.example"})
    assert created.status_code == 201

    links = (await client.get("/friendlinks")).json()
    assert [link["title"] for link in links] == ["Alice"]
    assert await content_cache.contains(CacheDivision.FRIEND_LINK, "all")

    assert (await client.delete(f"/friendlinks/{created.json()['id']}")).status_code == 204
    assert (await client.get("/friendlinks")).json() == []


async def test_delete_unknown_friend_link_is_204(client: AsyncClient) -> None:
    assert (await client.delete(f"/friendlinks/{uuid4()}")).status_code == 204


async def test_invalid_friend_link_url(client: AsyncClient) -> None:
    response = await client.post("/friendlinks", json={"title": "Bad", "linkUrl": "not a url"})
    assert response.status_code == 422
    assert response.json()["detail"] == "Validation failed"
    assert response.json()["errors"][0]["field"] == "linkUrl"


async def test_hot_tags_amount_validation(client: AsyncClient) -> None:
    assert (await client.get("/tags/hot", params={"amount": 0})).status_code == 422
    assert (await client.get("/tags/hot")).json() == []


async def test_cache_stats_and_clear(client: AsyncClient, content_cache: ContentCache) -> None:
    await client.get("/categories")
    await client.get("/categories")

    stats = (await client.get("/cache/stats")).json()
    assert stats["status"] == "success"
    assert stats["data"]["hits"] == 1
    assert stats["data"]["misses"] == 1

    cleared = await client.delete("/cache/category")
    assert cleared.json() == {"status": "success", "partition": "category", "removed": 1}
    assert not await content_cache.contains(CacheDivision.CATEGORY, "all")


async def test_cache_reset_stats(client: AsyncClient, content_cache: ContentCache) -> None:
    """Counters go back to zero while cached entries survive."""
    await client.get("/categories")
    await client.get("/categories")

    response = await client.get("/cache/reset-stats")
    assert response.status_code == 200
    assert response.json() == {"status": "success", "message": "Cache statistics reset"}

    stats = (await client.get("/cache/stats")).json()["data"]
    assert stats["hits"] == 0
    assert stats["misses"] == 0
    assert await content_cache.contains(CacheDivision.CATEGORY, "all")


async def test_clear_unknown_partition(client: AsyncClient) -> None:
    response = await client.delete("/cache/nope")
    assert response.status_code == 404
    assert "nope" in response.json()["detail"]


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["cache"]["backend"] == "in-memory"
    assert data["cache"]["status"] == "healthy"
