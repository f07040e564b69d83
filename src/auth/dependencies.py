from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.auth.dtos import SessionDTO
from src.auth.security import decode_session_token
from src.config.settings import settings

bearer_scheme = HTTPBearer(auto_error=False)


def get_optional_session(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> SessionDTO | None:
    """Resolve the caller from a bearer token, falling back to the session cookie."""
    token = credentials.credentials if credentials else None
    if token is None:
        token = request.cookies.get(settings.session_cookie_name)
    return decode_session_token(token)


def get_current_session(
    session: SessionDTO | None = Depends(get_optional_session),
) -> SessionDTO:
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return session
