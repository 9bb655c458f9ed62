from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.accounts.dependencies import get_account_write_model, require_host
from src.accounts.dtos import HostDTO
from src.accounts.repository.write_models import AccountWriteModel
from src.accounts.urls import HOST_PROFILE_URL
from src.models.schemas import CamelModel

router = APIRouter()


class HostProfileUpdate(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    preferred_name: str | None = None
    contact: str | None = None
    picture_url: str | None = None
    facebook_url: str | None = None
    instagram_url: str | None = None
    twitter_url: str | None = None
    linkedin_url: str | None = None
    website_url: str | None = None
    personal_statement: str | None = None


class HostProfileResponse(HostProfileUpdate):
    id: UUID
    user_id: UUID
    email: str
    name: str | None = None
    verified: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


@router.get(HOST_PROFILE_URL, response_model=HostProfileResponse)
async def get_host_profile(host: HostDTO = Depends(require_host)) -> HostDTO:
    return host


@router.put(HOST_PROFILE_URL, response_model=HostProfileResponse)
async def update_host_profile(
    profile: HostProfileUpdate,
    host: HostDTO = Depends(require_host),
    write_model: AccountWriteModel = Depends(get_account_write_model),
) -> HostDTO:
    """Update only the fields present in the request body."""
    updated = await write_model.update_host_profile(
        host.id, profile.model_dump(exclude_unset=True)
    )
    if not updated:
        raise HTTPException(status_code=404, detail="Host profile not found")
    return updated
