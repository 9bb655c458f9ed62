import asyncio

import pytest

from src.objects.repository.object_store import (
    LocalObjectStore,
    ObjectNotFoundError,
    normalize_object_path,
)


@pytest.fixture
def store(tmp_path):
    public_a = tmp_path / "public-a"
    public_b = tmp_path / "public-b"
    public_a.mkdir()
    public_b.mkdir()
    (public_b / "banner.txt").write_text("from b")
    (tmp_path / "secret.txt").write_text("top secret")
    return LocalObjectStore(str(tmp_path / "private"), [str(public_a), str(public_b)])


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://storage.example.com/objects/uploads/1", "/objects/uploads/1"),
        ("/objects/uploads/1", "/objects/uploads/1"),
        ("https://elsewhere.example.com/pic.png", "https://elsewhere.example.com/pic.png"),
    ],
)
def test_normalize_object_path(url, expected):
    assert normalize_object_path(url) == expected


async def test_upload_round_trip_keeps_content_type(store):
    object_path = await store.save_upload("abc", b"hello", "text/plain")

    stored = await store.get_private(object_path)

    assert object_path == "/objects/uploads/abc"
    assert stored.data == b"hello"
    assert stored.content_type == "text/plain"


async def test_upload_without_content_type(store):
    object_path = await store.save_upload("abc", b"hello", None)

    assert (await store.get_private(object_path)).content_type == "application/octet-stream"


async def test_content_type_sidecar_is_not_served(store):
    await store.save_upload("abc", b"hello", "text/plain")

    with pytest.raises(ObjectNotFoundError):
        await store.get_private("uploads/abc.content-type")


async def test_public_lookup_searches_every_path(store):
    stored = await store.get_public("banner.txt")

    assert stored.data == b"from b"


@pytest.mark.parametrize("path", ["../secret.txt", "../../secret.txt", "/../secret.txt"])
async def test_paths_cannot_escape_their_root(store, path):
    with pytest.raises(ObjectNotFoundError):
        await store.get_public(path)
    with pytest.raises(ObjectNotFoundError):
        await store.get_private(path)


async def test_upload_id_cannot_escape(store):
    with pytest.raises(ValueError):
        await store.save_upload("../../escape", b"x", None)


async def test_missing_objects_and_directories_are_not_found(store):
    await store.save_upload("abc", b"hello", None)

    with pytest.raises(ObjectNotFoundError):
        await store.get_private("/objects/uploads/missing")
    with pytest.raises(ObjectNotFoundError):
        await store.get_private("/objects/uploads")
    with pytest.raises(ObjectNotFoundError):
        await store.get_public("missing.txt")


async def test_filesystem_work_runs_in_worker_threads(store, monkeypatch):
    offloaded = []
    original_to_thread = asyncio.to_thread

    async def recording_to_thread(func, *args, **kwargs):
        offloaded.append(func.__name__)
        return await original_to_thread(func, *args, **kwargs)

    monkeypatch.setattr(asyncio, "to_thread", recording_to_thread)

    object_path = await store.save_upload("abc", b"hello", None)
    await store.get_private(object_path)
    await store.get_public("banner.txt")
    with pytest.raises(ObjectNotFoundError):
        await store.get_private("/objects/uploads/missing")

    assert offloaded == ["_store_upload", "_find_private", "_find_public", "_find_private"]
