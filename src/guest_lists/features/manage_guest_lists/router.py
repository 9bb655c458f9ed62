from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from src.accounts.dependencies import require_host
from src.accounts.dtos import HostDTO
from src.guest_lists.dependencies import (
    get_guest_list_read_model,
    get_guest_list_write_model,
    get_owned_guest_list,
)
from src.guest_lists.dtos import GuestListDTO, GuestListMemberDTO
from src.guest_lists.repository.read_models import GuestListReadModel
from src.guest_lists.repository.write_models import GuestListWriteModel
from src.guest_lists.schemas import (
    GuestListCreate,
    GuestListResponse,
    GuestListUpdate,
    MemberCreate,
    MemberResponse,
    MemberUpdate,
)
from src.guest_lists.urls import (
    GUEST_LIST_MEMBER_URL,
    GUEST_LIST_MEMBERS_URL,
    GUEST_LIST_URL,
    GUEST_LISTS_URL,
)
from src.models.schemas import SuccessResponse

router = APIRouter()


@router.get(GUEST_LISTS_URL, response_model=list[GuestListResponse])
async def list_guest_lists(
    host: HostDTO = Depends(require_host),
    read_model: GuestListReadModel = Depends(get_guest_list_read_model),
):
    return await read_model.list_host_guest_lists(host.id)


@router.post(GUEST_LISTS_URL, response_model=GuestListResponse, status_code=status.HTTP_201_CREATED)
async def create_guest_list(
    body: GuestListCreate,
    host: HostDTO = Depends(require_host),
    write_model: GuestListWriteModel = Depends(get_guest_list_write_model),
):
    return await write_model.create_guest_list(host.id, body.name, body.description)


@router.put(GUEST_LIST_URL, response_model=GuestListResponse)
async def update_guest_list(
    body: GuestListUpdate,
    guest_list: GuestListDTO = Depends(get_owned_guest_list),
    write_model: GuestListWriteModel = Depends(get_guest_list_write_model),
):
    changes = body.model_dump(exclude_unset=True)
    if "name" in changes and changes["name"] is None:
        raise HTTPException(status_code=400, detail="name cannot be empty")
    updated = await write_model.update_guest_list(guest_list.id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Guest list not found")
    return updated


@router.delete(GUEST_LIST_URL, response_model=SuccessResponse)
async def delete_guest_list(
    guest_list: GuestListDTO = Depends(get_owned_guest_list),
    write_model: GuestListWriteModel = Depends(get_guest_list_write_model),
) -> SuccessResponse:
    await write_model.delete_guest_list(guest_list.id)
    return SuccessResponse(message="Guest list deleted successfully")


@router.get(GUEST_LIST_MEMBERS_URL, response_model=list[MemberResponse])
async def list_members(
    guest_list: GuestListDTO = Depends(get_owned_guest_list),
    read_model: GuestListReadModel = Depends(get_guest_list_read_model),
):
    return await read_model.list_members(guest_list.id)


@router.post(GUEST_LIST_MEMBERS_URL, response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
async def add_member(
    body: MemberCreate,
    guest_list: GuestListDTO = Depends(get_owned_guest_list),
    write_model: GuestListWriteModel = Depends(get_guest_list_write_model),
):
    return await write_model.add_member(guest_list.id, body.name, str(body.email), body.phone)


async def get_list_member(
    member_id: UUID,
    guest_list: GuestListDTO = Depends(get_owned_guest_list),
    read_model: GuestListReadModel = Depends(get_guest_list_read_model),
) -> GuestListMemberDTO:
    member = await read_model.get_member(member_id)
    if not member or member.guest_list_id != guest_list.id:
        raise HTTPException(status_code=404, detail="Member not found")
    return member


@router.put(GUEST_LIST_MEMBER_URL, response_model=MemberResponse)
async def update_member(
    body: MemberUpdate,
    member: GuestListMemberDTO = Depends(get_list_member),
    write_model: GuestListWriteModel = Depends(get_guest_list_write_model),
):
    changes = body.model_dump(exclude_unset=True)
    for field in ("name", "email"):
        if field in changes and changes[field] is None:
            raise HTTPException(status_code=400, detail=f"{field} cannot be empty")
    if changes.get("email"):
        changes["email"] = str(changes["email"])
    updated = await write_model.update_member(member.id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Member not found")
    return updated


@router.delete(GUEST_LIST_MEMBER_URL, response_model=SuccessResponse)
async def remove_member(
    member: GuestListMemberDTO = Depends(get_list_member),
    write_model: GuestListWriteModel = Depends(get_guest_list_write_model),
) -> SuccessResponse:
    await write_model.remove_member(member.id)
    return SuccessResponse(message="Member removed successfully")
