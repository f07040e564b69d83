import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, EmailStr, Field

from src.auth.dependencies import get_current_session
from src.auth.dtos import EmailAlreadyRegisteredError, SessionDTO
from src.auth.repository.credential_store import CredentialStore, SqlCredentialStore
from src.auth.security import create_session_token
from src.auth.urls import LOGIN_URL, LOGOUT_URL, ME_URL, REGISTER_URL
from src.config.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter()


class CredentialsRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class UserResponse(BaseModel):
    id: UUID
    email: str


class SessionResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str = "bearer"


def get_credential_store() -> CredentialStore:
    """Dependency to get credential store instance."""
    return SqlCredentialStore()


def _start_session(response: Response, identity: SessionDTO) -> SessionResponse:
    token = create_session_token(identity.user_id, identity.email)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=settings.access_token_expire_minutes * 60,
        path="/",
    )
    return SessionResponse(
        user=UserResponse(id=identity.user_id, email=identity.email),
        access_token=token,
    )


@router.post(REGISTER_URL, response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def register(
    credentials: CredentialsRequest,
    response: Response,
    store: CredentialStore = Depends(get_credential_store),
) -> SessionResponse:
    """Create an account and log it in."""
    try:
        identity = await store.create_user(credentials.email, credentials.password)
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _start_session(response, identity)


@router.post(LOGIN_URL, response_model=SessionResponse)
async def login(
    credentials: CredentialsRequest,
    response: Response,
    store: CredentialStore = Depends(get_credential_store),
) -> SessionResponse:
    identity = await store.verify(credentials.email, credentials.password)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password"
        )
    return _start_session(response, identity)


@router.post(LOGOUT_URL)
async def logout(response: Response) -> dict[str, bool]:
    response.delete_cookie(key=settings.session_cookie_name, path="/")
    return {"success": True}


@router.get(ME_URL, response_model=UserResponse)
async def me(session: SessionDTO = Depends(get_current_session)) -> UserResponse:
    return UserResponse(id=session.user_id, email=session.email)
