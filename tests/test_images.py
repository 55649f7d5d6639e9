"""Tests for image endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from gallery.models.comment import Comment
from gallery.models.image import Image

IMAGE_URL = "https://res.cloudinary.com/demo/image/upload/v1/photo.jpg"


@pytest.mark.asyncio
async def test_get_images_empty(client: AsyncClient):
    """Test listing images when none exist."""
    response = await client.get("/api/images")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_image(client: AsyncClient):
    """Test creating a new image."""
    response = await client.post("/api/images", json={"url": IMAGE_URL})

    assert response.status_code == 201
    data = response.json()
    assert isinstance(data["id"], int)
    assert data["url"] == IMAGE_URL
    assert data["createdAt"]
    assert data["comments"] == []


@pytest.mark.asyncio
async def test_create_image_round_trip(client: AsyncClient):
    """Test that a created image is listed exactly as returned."""
    created = (await client.post("/api/images", json={"url": IMAGE_URL})).json()

    response = await client.get("/api/images")

    assert response.status_code == 200
    listed = response.json()[0]
    assert listed == created
    assert listed["comments"] == []


@pytest.mark.asyncio
async def test_create_images_ids_increase_and_newest_first(client: AsyncClient):
    """Test that ids strictly increase and the newest image is listed first."""
    ids = []
    for i in range(3):
        response = await client.post("/api/images", json={"url": f"{IMAGE_URL}?n={i}"})
        assert response.status_code == 201
        ids.append(response.json()["id"])

    assert ids == sorted(set(ids))

    data = (await client.get("/api/images")).json()
    assert [img["id"] for img in data] == list(reversed(ids))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {},
        {"url": None},
        {"url": 123},
        {"url": ["a"]},
        {"url": ""},
        {"link": IMAGE_URL},
    ],
)
async def test_create_image_invalid_url(client: AsyncClient, body: dict):
    """Test that a missing or non-string url is rejected and nothing is stored."""
    response = await client.post("/api/images", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Image URL is required and must be a string."}

    listing = await client.get("/api/images")
    assert listing.json() == []


@pytest.mark.asyncio
async def test_create_image_malformed_body(client: AsyncClient):
    """Test that a body that is not JSON is a validation error."""
    response = await client.post(
        "/api/images",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_get_images_with_comments(
    client: AsyncClient, sample_images: list[Image], sample_comments: list[Comment]
):
    """Test that images are newest first with nested comments newest first."""
    response = await client.get("/api/images")

    assert response.status_code == 200
    data = response.json()
    assert [img["id"] for img in data] == [img.id for img in reversed(sample_images)]

    oldest = data[-1]
    assert [c["content"] for c in oldest["comments"]] == [
        "comment at +3m",
        "comment at +2m",
        "comment at +1m",
    ]
    assert all(c["imageId"] == oldest["id"] for c in oldest["comments"])
    assert data[0]["comments"] == []


@pytest.mark.asyncio
async def test_get_images_reflects_new_comment(client: AsyncClient):
    """Test that a comment added after creation shows up in the listing."""
    image = (await client.post("/api/images", json={"url": IMAGE_URL})).json()
    await client.post(f"/api/comments/{image['id']}", json={"content": "nice"})

    data = (await client.get("/api/images")).json()

    assert [c["content"] for c in data[0]["comments"]] == ["nice"]


@pytest.mark.asyncio
async def test_get_images_store_error(client: AsyncClient, db_session, monkeypatch):
    """Test that a storage failure is reported as a generic 500."""

    async def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "execute", broken_execute)

    response = await client.get("/api/images")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch images."}


@pytest.mark.asyncio
async def test_create_image_store_error(client: AsyncClient, db_session, monkeypatch):
    """Test that a failed insert is reported as a generic 500."""

    async def broken_commit(*args, **kwargs):
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "commit", broken_commit)

    response = await client.post("/api/images", json={"url": IMAGE_URL})

    assert response.status_code == 500
    body = response.json()
    assert body == {"error": "Failed to save image."}
    assert "disk" not in body["error"]


@pytest.mark.asyncio
async def test_create_image_ignores_failures_after_commit(
    client: AsyncClient, db_session, monkeypatch
):
    """Test that create answers from the committed row without reading again."""
    real_commit = db_session.commit

    async def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection reset"))

    async def commit_then_break(*args, **kwargs):
        await real_commit()
        monkeypatch.setattr(db_session, "execute", broken_execute)

    monkeypatch.setattr(db_session, "commit", commit_then_break)

    response = await client.post("/api/images", json={"url": IMAGE_URL})

    assert response.status_code == 201
    data = response.json()
    assert data["url"] == IMAGE_URL
    assert data["comments"] == []

    monkeypatch.undo()
    listing = (await client.get("/api/images")).json()
    assert [img["id"] for img in listing] == [data["id"]]
    assert listing[0] == data
