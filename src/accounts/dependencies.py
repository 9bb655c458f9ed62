"""Session-backed identity dependencies shared by every host-facing route."""

from uuid import UUID

from fastapi import Depends, HTTPException, Request

from src.accounts.dtos import HostDTO, UserDTO
from src.accounts.repository.read_models import AccountReadModel, SqlAccountReadModel
from src.accounts.repository.write_models import AccountWriteModel, SqlAccountWriteModel

SESSION_USER_KEY = "userId"


def get_account_read_model() -> AccountReadModel:
    return SqlAccountReadModel()


def get_account_write_model() -> AccountWriteModel:
    return SqlAccountWriteModel()


def get_session_user_id(request: Request) -> UUID | None:
    raw = request.session.get(SESSION_USER_KEY)
    if not raw:
        return None
    try:
        return UUID(raw)
    except ValueError:
        return None


async def optional_user(
    request: Request,
    read_model: AccountReadModel = Depends(get_account_read_model),
) -> UserDTO | None:
    user_id = get_session_user_id(request)
    if user_id is None:
        return None
    return await read_model.get_user(user_id)


async def require_user(
    request: Request,
    read_model: AccountReadModel = Depends(get_account_read_model),
) -> UserDTO:
    user_id = get_session_user_id(request)
    if user_id is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    user = await read_model.get_user(user_id)
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


async def require_host(
    user: UserDTO = Depends(require_user),
    read_model: AccountReadModel = Depends(get_account_read_model),
) -> HostDTO:
    host = await read_model.get_host_by_user_id(user.id)
    if not host:
        raise HTTPException(status_code=404, detail="Host profile not found")
    return host


def assert_owned_by(owner_host_id: UUID, host: HostDTO) -> None:
    if owner_host_id != host.id:
        raise HTTPException(status_code=403, detail="Access denied")
