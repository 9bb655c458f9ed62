import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import EmailStr, Field

from src.accounts.dependencies import (
    SESSION_USER_KEY,
    get_account_read_model,
    get_account_write_model,
    require_user,
)
from src.accounts.dtos import UserAlreadyExistsError, UserDTO
from src.accounts.repository.read_models import AccountReadModel
from src.accounts.repository.write_models import AccountWriteModel
from src.accounts.security import hash_password, verify_password
from src.accounts.urls import ME_URL, SIGNIN_URL, SIGNOUT_URL, SIGNUP_URL
from src.models.schemas import CamelModel

logger = logging.getLogger(__name__)

router = APIRouter()


class Credentials(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserResponse(CamelModel):
    id: UUID
    email: str


class UserEnvelope(CamelModel):
    user: UserResponse


class SignOutResponse(CamelModel):
    success: bool


def _start_session(request: Request, user: UserDTO) -> None:
    request.session.clear()
    request.session[SESSION_USER_KEY] = str(user.id)


@router.post(SIGNUP_URL, response_model=UserEnvelope)
async def signup(
    credentials: Credentials,
    request: Request,
    write_model: AccountWriteModel = Depends(get_account_write_model),
) -> UserEnvelope:
    try:
        user = await write_model.create_user(
            email=credentials.email,
            password_hash=hash_password(credentials.password),
        )
    except UserAlreadyExistsError:
        raise HTTPException(status_code=400, detail="User already exists")

    _start_session(request, user)
    logger.info("User %s signed up", user.id)
    return UserEnvelope(user=UserResponse(id=user.id, email=user.email))


@router.post(SIGNIN_URL, response_model=UserEnvelope)
async def signin(
    credentials: Credentials,
    request: Request,
    read_model: AccountReadModel = Depends(get_account_read_model),
) -> UserEnvelope:
    found = await read_model.get_credentials(credentials.email)
    if not found or not verify_password(credentials.password, found.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    _start_session(request, found.user)
    return UserEnvelope(user=UserResponse(id=found.user.id, email=found.user.email))


@router.post(SIGNOUT_URL, response_model=SignOutResponse)
async def signout(request: Request) -> SignOutResponse:
    request.session.clear()
    return SignOutResponse(success=True)


@router.get(ME_URL, response_model=UserEnvelope)
async def me(user: UserDTO = Depends(require_user)) -> UserEnvelope:
    return UserEnvelope(user=UserResponse(id=user.id, email=user.email))
