"""Authentication gate: credential checks, password changes, and the bootstrap admin account."""

import logging

from app.core.security import hash_password, verify_password
from app.schemas.auth import UserRecord
from app.services.storage import Storage

logger = logging.getLogger(__name__)

# Default BOOTSTRAP_ADMIN_PASSWORD; creating the bootstrap account with it logs a warning.
DEFAULT_BOOTSTRAP_PASSWORD = "admin"

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"
NOT_AUTHORIZED_MESSAGE = "Not authorized"
INCORRECT_PASSWORD_MESSAGE = "Current password is incorrect"


class AuthServiceError(Exception):
    """Base class for authentication failures that map to a client-facing message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidCredentialsError(AuthServiceError):
    """Unknown username or wrong password. Deliberately does not say which."""

    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS_MESSAGE)


class NotAuthorizedError(AuthServiceError):
    """Credentials are valid but the account is not an administrator."""

    def __init__(self) -> None:
        super().__init__(NOT_AUTHORIZED_MESSAGE)


class IncorrectPasswordError(AuthServiceError):
    """Current password supplied to a password change did not match."""

    def __init__(self) -> None:
        super().__init__(INCORRECT_PASSWORD_MESSAGE)


def authenticate_admin(storage: Storage, username: str, password: str) -> UserRecord:
    """
    Check credentials and require the admin flag.

    Raises InvalidCredentialsError for an unknown user or wrong password (same
    error either way), NotAuthorizedError for a valid non-admin account.
    A malformed stored hash propagates as MalformedPasswordHashError.
    """
    user = storage.get_user_by_username(username)
    if user is None or not verify_password(password, user.password):
        logger.warning("Failed login attempt: username=%r", username)
        raise InvalidCredentialsError()
    if not user.is_admin:
        logger.warning("Login refused for non-admin account: username=%r", username)
        raise NotAuthorizedError()
    logger.info("Admin signed in: user_id=%s username=%r", user.id, user.username)
    return user


def change_password(storage: Storage, user: UserRecord, current_password: str, new_password: str) -> UserRecord:
    """
    Replace the user's password after re-verifying the current one against the stored hash.

    The stored row is re-read so a password changed in another session is honoured.
    """
    stored = storage.get_user(user.id)
    if stored is None or not verify_password(current_password, stored.password):
        raise IncorrectPasswordError()
    updated = storage.update_user_password(user.id, hash_password(new_password))
    if updated is None:
        # Users are never deleted, so this only happens if the row vanished mid-request.
        raise AuthServiceError("Failed to update password")
    logger.info("Password changed: user_id=%s", user.id)
    return updated


def ensure_bootstrap_admin(storage: Storage, username: str, password: str) -> bool:
    """
    Create the admin account if no user with `username` exists. Returns True if created.

    Idempotent: an existing account (admin or not) is left untouched, including its password.
    """
    if storage.get_user_by_username(username) is not None:
        return False
    storage.create_user(username, hash_password(password), is_admin=True)
    if password == DEFAULT_BOOTSTRAP_PASSWORD:
        logger.warning(
            "Created bootstrap admin %r with the default password; change it immediately "
            "(POST /api/admin/change-password) or set BOOTSTRAP_ADMIN_PASSWORD",
            username,
        )
    else:
        logger.info("Created bootstrap admin %r", username)
    return True
