"""Request-scoped dependencies: configured backends, the current session, and the admin gate."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status

from app.core.config import Settings
from app.core.security import sign_session_id, unsign_session_id
from app.schemas.auth import UserRecord
from app.services.sessions import SessionStore
from app.services.storage import Storage

NOT_AUTHENTICATED_MESSAGE = "Not authenticated"
NOT_AUTHORIZED_MESSAGE = "Not authorized"


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    """Storage backend selected at startup."""
    return request.app.state.storage


def get_session_store(request: Request) -> SessionStore:
    """Session backend selected at startup."""
    return request.app.state.session_store


def get_session_id(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> str | None:
    """Session id from the signed cookie, or None when absent or tampered with."""
    return unsign_session_id(
        request.cookies.get(settings.SESSION_COOKIE_NAME),
        settings.SESSION_SECRET.get_secret_value(),
    )


def set_session_cookie(response: Response, settings: Settings, sid: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=sign_session_id(sid, settings.SESSION_SECRET.get_secret_value()),
        max_age=settings.SESSION_MAX_AGE_DAYS * 24 * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


def get_current_user(
    sid: Annotated[str | None, Depends(get_session_id)],
    sessions: Annotated[SessionStore, Depends(get_session_store)],
    storage: Annotated[Storage, Depends(get_storage)],
) -> UserRecord:
    """Dependency: require a live session bound to an existing user. Raises 401 otherwise."""
    if sid is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_AUTHENTICATED_MESSAGE)
    record = sessions.get(sid)
    if record is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_AUTHENTICATED_MESSAGE)
    user = storage.get_user(record.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_AUTHENTICATED_MESSAGE)
    return user


def require_admin(
    current_user: Annotated[UserRecord, Depends(get_current_user)],
) -> UserRecord:
    """Dependency: require an authenticated user with the admin flag. Raises 403 for non-admin."""
    if not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=NOT_AUTHORIZED_MESSAGE)
    return current_user


StorageDep = Annotated[Storage, Depends(get_storage)]
AdminUser = Annotated[UserRecord, Depends(require_admin)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
