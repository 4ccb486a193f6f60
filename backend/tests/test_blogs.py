"""
Booking API - Blog & Category Tests
====================================

What we test:
    ✅ Create (201 with id/createdAt), missing title (400)
    ✅ Get / delete by id, 404 for unknown and malformed ids
    ✅ /api/blogsfilter: category exact match AND case-insensitive search
    ✅ /api/categories: distinct non-empty categories from posts
    ✅ /add-category: 201, empty 400, duplicate 400; /api/getcategories
"""

from datetime import datetime, timezone

import pytest

POSTS = [
    {"title": "Learning Rust", "content": "Ownership explained", "category": "tech"},
    {"title": "Garden notes", "content": "Tomatoes like RUST-free tools", "category": "home"},
    {"title": "Async Python", "content": "Event loops and rust comparisons", "category": "tech"},
    {"title": "Weekly digest", "content": "Nothing about that language", "category": "tech"},
    {"title": "Untagged", "content": "No category here"},
    {"title": "Blank category", "content": "Empty string", "category": ""},
]


async def _seed(client, posts=POSTS):
    ids = []
    for post in posts:
        response = await client.post("/api/blogs", json=post)
        assert response.status_code == 201, response.text
        ids.append(response.json()["id"])
    return ids


class TestBlogCrud:

    @pytest.mark.asyncio
    async def test_create_returns_stored_post(self, test_client):
        before = datetime.now(timezone.utc)
        response = await test_client.post(
            "/api/blogs",
            json={
                "title": "Hello",
                "content": "World",
                "image": "data:image/png;base64,iVBORw0KGgo=",
                "category": "news",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["title"] == "Hello"
        assert body["image"].startswith("data:image/png")
        created = datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00"))
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        assert before.replace(microsecond=0) <= created <= datetime.now(timezone.utc)

    @pytest.mark.asyncio
    async def test_missing_title(self, test_client):
        response = await test_client.post("/api/blogs", json={"content": "no title"})

        assert response.status_code == 400
        assert "title" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_empty_content(self, test_client):
        response = await test_client.post("/api/blogs", json={"title": "t", "content": ""})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_get_by_id(self, test_client):
        [post_id] = await _seed(test_client, POSTS[:1])

        response = await test_client.get(f"/api/blogs/{post_id}")

        assert response.status_code == 200
        assert response.json()["title"] == "Learning Rust"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", ["00000000-0000-0000-0000-000000000000", "nope"])
    async def test_get_missing(self, test_client, post_id):
        response = await test_client.get(f"/api/blogs/{post_id}")

        assert response.status_code == 404
        assert response.json() == {"message": "Blog not found"}

    @pytest.mark.asyncio
    async def test_delete(self, test_client):
        [post_id] = await _seed(test_client, POSTS[:1])

        response = await test_client.delete(f"/api/blogs/{post_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Blog deleted successfully"}
        assert (await test_client.get(f"/api/blogs/{post_id}")).status_code == 404
        assert (await test_client.delete(f"/api/blogs/{post_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_list_all(self, test_client):
        await _seed(test_client)

        response = await test_client.get("/api/blogs")

        assert response.status_code == 200
        assert len(response.json()) == len(POSTS)


class TestBlogFilter:

    @pytest.mark.asyncio
    async def test_category_and_search(self, test_client):
        await _seed(test_client)

        response = await test_client.get(
            "/api/blogsfilter", params={"category": "tech", "search": "rust"}
        )

        titles = sorted(p["title"] for p in response.json())
        assert titles == ["Async Python", "Learning Rust"]

    @pytest.mark.asyncio
    async def test_search_only_is_case_insensitive(self, test_client):
        await _seed(test_client)

        response = await test_client.get("/api/blogsfilter", params={"search": "RuSt"})

        titles = sorted(p["title"] for p in response.json())
        assert titles == ["Async Python", "Garden notes", "Learning Rust"]

    @pytest.mark.asyncio
    async def test_category_only(self, test_client):
        await _seed(test_client)

        response = await test_client.get("/api/blogsfilter", params={"category": "home"})

        assert [p["title"] for p in response.json()] == ["Garden notes"]

    @pytest.mark.asyncio
    async def test_search_wildcards_are_literal(self, test_client):
        await _seed(test_client)

        response = await test_client.get("/api/blogsfilter", params={"search": "%"})

        assert response.json() == []

    @pytest.mark.asyncio
    async def test_no_filters_returns_everything(self, test_client):
        await _seed(test_client)

        response = await test_client.get("/api/blogsfilter", params={"search": "", "category": ""})

        assert len(response.json()) == len(POSTS)


class TestCategories:

    @pytest.mark.asyncio
    async def test_derived_categories_distinct(self, test_client):
        await _seed(test_client)

        response = await test_client.get("/api/categories")

        assert response.status_code == 200
        assert sorted(response.json()) == ["home", "tech"]

    @pytest.mark.asyncio
    async def test_add_category(self, test_client):
        response = await test_client.post("/add-category", json={"category": "travel"})

        assert response.status_code == 201
        assert response.json() == {"message": "Category added successfully"}
        listed = (await test_client.get("/api/getcategories")).json()
        assert [c["name"] for c in listed] == ["travel"]
        assert listed[0]["id"]

    @pytest.mark.asyncio
    async def test_add_duplicate_category(self, test_client):
        await test_client.post("/add-category", json={"category": "travel"})

        response = await test_client.post("/add-category", json={"category": "travel"})

        assert response.status_code == 400
        assert response.json() == {"message": "Category already exists"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"category": ""}, {"category": "   "}])
    async def test_add_empty_category(self, test_client, body):
        response = await test_client.post("/add-category", json=body)

        assert response.status_code == 400
        assert response.json() == {"message": "Category is required"}

    @pytest.mark.asyncio
    async def test_listings_are_independent(self, test_client):
        await test_client.post("/add-category", json={"category": "travel"})
        await _seed(test_client, POSTS[:1])

        explicit = [c["name"] for c in (await test_client.get("/api/getcategories")).json()]
        derived = (await test_client.get("/api/categories")).json()

        assert explicit == ["travel"]
        assert derived == ["tech"]

    @pytest.mark.asyncio
    async def test_getcategories_in_insertion_order(self, test_client):
        for name in ("zeta", "alpha", "mango"):
            await test_client.post("/add-category", json={"category": name})

        listed = (await test_client.get("/api/getcategories")).json()

        assert [c["name"] for c in listed] == ["zeta", "alpha", "mango"]
