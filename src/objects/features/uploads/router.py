import logging
from uuid import UUID, uuid4

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import Field

from src.accounts.dependencies import get_account_write_model, require_host, require_user
from src.accounts.dtos import HostDTO, UserDTO
from src.accounts.repository.write_models import AccountWriteModel
from src.models.schemas import CamelModel
from src.objects.dependencies import get_object_store
from src.objects.repository.object_store import (
    ObjectNotFoundError,
    ObjectStore,
    StoredObject,
    normalize_object_path,
)
from src.objects.urls import (
    HOST_PICTURE_URL,
    PRIVATE_OBJECT_URL,
    PUBLIC_OBJECT_URL,
    UPLOAD_URL,
    UPLOAD_URL_REQUEST_URL,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class UploadURLResponse(CamelModel):
    upload_url: str = Field(alias="uploadURL")


class ObjectPathResponse(CamelModel):
    object_path: str


class HostPictureUpdate(CamelModel):
    picture_url: str | None = None


def _object_response(stored: StoredObject) -> Response:
    return Response(
        content=stored.data,
        media_type=stored.content_type,
        headers={"Cache-Control": "private, max-age=3600"},
    )


@router.post(UPLOAD_URL_REQUEST_URL, response_model=UploadURLResponse)
async def request_upload_url(request: Request, user: UserDTO = Depends(require_user)):
    """Hand out a fresh URL the client can PUT a file to."""
    path = UPLOAD_URL.format(object_id=uuid4())
    return {"upload_url": str(request.base_url).rstrip("/") + path}


@router.put(UPLOAD_URL, response_model=ObjectPathResponse)
async def upload_object(
    object_id: UUID,
    request: Request,
    user: UserDTO = Depends(require_user),
    store: ObjectStore = Depends(get_object_store),
):
    data = await request.body()
    object_path = await store.save_upload(
        str(object_id), data, request.headers.get("content-type")
    )
    logger.info("User %s uploaded %s", user.id, object_path)
    return {"object_path": object_path}


@router.put(HOST_PICTURE_URL, response_model=ObjectPathResponse)
async def set_host_picture(
    body: HostPictureUpdate,
    host: HostDTO = Depends(require_host),
    write_model: AccountWriteModel = Depends(get_account_write_model),
):
    if not body.picture_url:
        raise HTTPException(status_code=400, detail="pictureUrl is required")

    object_path = normalize_object_path(body.picture_url)
    updated = await write_model.update_host_profile(host.id, {"picture_url": object_path})
    if not updated:
        raise HTTPException(status_code=404, detail="Host profile not found")
    return {"object_path": object_path}


@router.get(PRIVATE_OBJECT_URL)
async def get_private_object(
    object_path: str,
    store: ObjectStore = Depends(get_object_store),
) -> Response:
    try:
        stored = await store.get_private(object_path)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="Object not found")
    return _object_response(stored)


@router.get(PUBLIC_OBJECT_URL)
async def get_public_object(
    file_path: str,
    store: ObjectStore = Depends(get_object_store),
) -> Response:
    try:
        stored = await store.get_public(file_path)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="File not found")
    return _object_response(stored)
