import pytest

from src.accounts.urls import HOST_PROFILE_URL
from src.main import app
from src.objects.dependencies import get_object_store
from src.objects.repository.object_store import LocalObjectStore
from src.objects.urls import HOST_PICTURE_URL, UPLOAD_URL_REQUEST_URL


@pytest.fixture
def object_store(tmp_path, client_factory):
    public_dir = tmp_path / "public"
    public_dir.mkdir()
    (public_dir / "logo.svg").write_text("<svg/>")
    store = LocalObjectStore(str(tmp_path / "private"), [str(public_dir)])
    app.dependency_overrides[get_object_store] = lambda: store
    return store


@pytest.mark.asyncio
async def test_upload_then_serve(host_client, client, object_store):
    issued = await host_client.post(UPLOAD_URL_REQUEST_URL)
    upload_url = issued.json()["uploadURL"]
    assert upload_url.startswith("http://test/objects/uploads/")

    uploaded = await host_client.put(
        upload_url, content=b"\x89PNG...", headers={"content-type": "image/png"}
    )
    object_path = uploaded.json()["objectPath"]
    served = await client.get(object_path)

    assert uploaded.status_code == 200
    assert object_path == upload_url.removeprefix("http://test")
    assert served.status_code == 200
    assert served.content == b"\x89PNG..."
    assert served.headers["content-type"] == "image/png"


@pytest.mark.asyncio
async def test_upload_requires_sign_in(client, object_store):
    assert (await client.post(UPLOAD_URL_REQUEST_URL)).status_code == 401
    response = await client.put(
        "/objects/uploads/00000000-0000-0000-0000-000000000000", content=b"data"
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_set_host_picture_stores_object_path(host_client, object_store):
    response = await host_client.put(
        HOST_PICTURE_URL,
        json={"pictureUrl": "https://cdn.example.com/objects/uploads/abc?sig=1"},
    )
    profile = await host_client.get(HOST_PROFILE_URL)

    assert response.status_code == 200
    assert response.json() == {"objectPath": "/objects/uploads/abc"}
    assert profile.json()["pictureUrl"] == "/objects/uploads/abc"


@pytest.mark.asyncio
async def test_set_host_picture_requires_url(host_client, object_store):
    response = await host_client.put(HOST_PICTURE_URL, json={})

    assert response.status_code == 400
    assert response.json() == {"error": "pictureUrl is required"}


@pytest.mark.asyncio
async def test_missing_private_object(client, object_store):
    response = await client.get("/objects/uploads/missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Object not found"}


@pytest.mark.asyncio
async def test_public_objects(client, object_store):
    found = await client.get("/public-objects/logo.svg")
    missing = await client.get("/public-objects/nope.png")

    assert found.status_code == 200
    assert found.text == "<svg/>"
    assert found.headers["content-type"].startswith("image/svg+xml")
    assert missing.status_code == 404
    assert missing.json() == {"error": "File not found"}
