"""Admin login, logout, identity and password change."""

import logging

from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from app.api.deps import (
    AdminUser,
    SessionStoreDep,
    SettingsDep,
    StorageDep,
    clear_session_cookie,
    get_session_id,
    set_session_cookie,
)
from app.schemas.auth import AdminIdentity, ChangePasswordRequest, LoginRequest
from app.schemas.common import SuccessResponse
from app.services.auth import (
    AuthServiceError,
    IncorrectPasswordError,
    InvalidCredentialsError,
    NotAuthorizedError,
    authenticate_admin,
    change_password,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=AdminIdentity)
def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    storage: StorageDep,
    sessions: SessionStoreDep,
    settings: SettingsDep,
):
    """
    Authenticate with username and password and start an admin session (cookie).

    Unknown user and wrong password produce the same 401. A valid non-admin
    account gets 403 and leaves without any session.
    """
    try:
        user = authenticate_admin(storage, body.username, body.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    except NotAuthorizedError as e:
        previous = get_session_id(request, settings)
        if previous:
            sessions.destroy(previous)
        denied = JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"error": e.message})
        clear_session_cookie(denied, settings)
        return denied

    # Never reuse a session id presented before authentication.
    previous = get_session_id(request, settings)
    if previous:
        sessions.destroy(previous)
    record = sessions.create(user.id)
    set_session_cookie(response, settings, record.sid)
    return user.identity()


@router.post("/logout", response_model=SuccessResponse, response_model_exclude_none=True)
def logout(
    request: Request,
    response: Response,
    sessions: SessionStoreDep,
    settings: SettingsDep,
) -> SuccessResponse:
    """End the current session. Succeeds whether or not a session exists."""
    sid = get_session_id(request, settings)
    if sid:
        sessions.destroy(sid)
    clear_session_cookie(response, settings)
    return SuccessResponse()


@router.get("/me", response_model=AdminIdentity)
def me(current_user: AdminUser) -> AdminIdentity:
    """Identity of the signed-in admin. 401 without a session, 403 for a non-admin session."""
    return current_user.identity()


@router.post("/change-password", response_model=SuccessResponse)
def post_change_password(
    body: ChangePasswordRequest,
    current_user: AdminUser,
    storage: StorageDep,
) -> SuccessResponse:
    """Change the signed-in admin's password after re-checking the current one."""
    try:
        change_password(storage, current_user, body.current_password, body.new_password)
    except IncorrectPasswordError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except AuthServiceError as e:
        logger.error("Password change failed: user_id=%s: %s", current_user.id, e.message)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message) from e
    return SuccessResponse(message="Password updated successfully")
