"""Filesystem-backed object storage for uploaded files such as host pictures."""

import asyncio
import logging
import mimetypes
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

OBJECTS_PREFIX = "/objects/"
UPLOADS_DIR = "uploads"
DEFAULT_CONTENT_TYPE = "application/octet-stream"
# Content type of an upload is kept next to it in a sidecar file
CONTENT_TYPE_SUFFIX = ".content-type"


class ObjectNotFoundError(Exception):
    def __init__(self, object_path: str) -> None:
        self.object_path = object_path
        super().__init__(f"Object not found: {object_path}")


@dataclass(frozen=True)
class StoredObject:
    data: bytes
    content_type: str


def normalize_object_path(url: str) -> str:
    """
    Map an upload URL to the /objects/... path the API serves it from.
    URLs that do not point at our object routes are returned unchanged.
    """
    path = urlparse(url).path if "://" in url else url
    if path.startswith(OBJECTS_PREFIX):
        return path
    return url


def _resolve_inside(root: Path, relative: str) -> Path | None:
    """Join and resolve, refusing paths that escape the root."""
    root = root.resolve()
    candidate = (root / relative.lstrip("/")).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    return candidate


def _read(path: Path, object_path: str) -> StoredObject:
    if not path.is_file():
        raise ObjectNotFoundError(object_path)
    sidecar = path.with_name(path.name + CONTENT_TYPE_SUFFIX)
    if sidecar.is_file():
        content_type = sidecar.read_text().strip() or DEFAULT_CONTENT_TYPE
    else:
        content_type = mimetypes.guess_type(path.name)[0] or DEFAULT_CONTENT_TYPE
    return StoredObject(data=path.read_bytes(), content_type=content_type)


def _write(path: Path, data: bytes, content_type: str | None) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    if content_type:
        path.with_name(path.name + CONTENT_TYPE_SUFFIX).write_text(content_type)


class ObjectStore(ABC):
    @abstractmethod
    async def save_upload(self, object_id: str, data: bytes, content_type: str | None) -> str:
        """Store an uploaded body and return its /objects/... path."""
        raise NotImplementedError

    @abstractmethod
    async def get_private(self, object_path: str) -> StoredObject:
        """Raises ObjectNotFoundError when nothing is stored there."""
        raise NotImplementedError

    @abstractmethod
    async def get_public(self, file_path: str) -> StoredObject:
        """First match across the public search paths; raises ObjectNotFoundError."""
        raise NotImplementedError


class LocalObjectStore(ObjectStore):
    """Filesystem lookups and reads all run in a worker thread."""

    def __init__(self, private_dir: str, public_search_paths: list[str]) -> None:
        self.private_dir = Path(private_dir)
        self.public_search_paths = [Path(path) for path in public_search_paths]

    async def save_upload(self, object_id: str, data: bytes, content_type: str | None) -> str:
        object_path = await asyncio.to_thread(self._store_upload, object_id, data, content_type)
        logger.info("Stored upload %s (%d bytes)", object_id, len(data))
        return object_path

    async def get_private(self, object_path: str) -> StoredObject:
        return await asyncio.to_thread(self._find_private, object_path)

    async def get_public(self, file_path: str) -> StoredObject:
        return await asyncio.to_thread(self._find_public, file_path)

    def _store_upload(self, object_id: str, data: bytes, content_type: str | None) -> str:
        relative = f"{UPLOADS_DIR}/{object_id}"
        path = _resolve_inside(self.private_dir, relative)
        if path is None:
            raise ValueError(f"Invalid object id: {object_id}")
        _write(path, data, content_type)
        return f"{OBJECTS_PREFIX}{relative}"

    def _find_private(self, object_path: str) -> StoredObject:
        path = _resolve_inside(self.private_dir, object_path.removeprefix(OBJECTS_PREFIX))
        if path is None or path.name.endswith(CONTENT_TYPE_SUFFIX):
            raise ObjectNotFoundError(object_path)
        return _read(path, object_path)

    def _find_public(self, file_path: str) -> StoredObject:
        for root in self.public_search_paths:
            path = _resolve_inside(root, file_path)
            if path is None:
                continue
            try:
                return _read(path, file_path)
            except ObjectNotFoundError:
                continue
        raise ObjectNotFoundError(file_path)
