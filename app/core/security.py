"""Password hashing and session-cookie signing for authentication."""

import secrets

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt
from itsdangerous import BadSignature, Signer

# scrypt cost parameters (N, r, p) and derived key length. These match the
# defaults of Node's crypto.scrypt so existing hashes keep verifying.
SCRYPT_N = 2**14
SCRYPT_R = 8
SCRYPT_P = 1
KEY_LENGTH = 64
SALT_BYTES = 16

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

SESSION_COOKIE_SALT = "landing.session.v1"


class MalformedPasswordHashError(ValueError):
    """Raised when a stored password hash is not in '<hex key>.<hex salt>' form."""


def _kdf(salt: str) -> Scrypt:
    # The hex text of the salt (not its raw bytes) is the scrypt salt input.
    return Scrypt(
        salt=salt.encode("ascii"),
        length=KEY_LENGTH,
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
    )


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage as '<hex key>.<hex salt>'. Do not store plain passwords."""
    salt = secrets.token_hex(SALT_BYTES)
    key = _kdf(salt).derive(plain_password.encode("utf-8"))
    return f"{key.hex()}.{salt}"


def verify_password(plain_password: str, encoded: str) -> bool:
    """
    Verify a plain password against a stored hash in constant time.

    Returns False on mismatch. Raises MalformedPasswordHashError when the stored
    value cannot be parsed; that is a data problem, not a failed login.
    """
    hashed, sep, salt = encoded.partition(".")
    if not sep or not hashed or not salt:
        raise MalformedPasswordHashError("Stored password hash is missing its salt separator")
    try:
        expected = bytes.fromhex(hashed)
    except ValueError as e:
        raise MalformedPasswordHashError("Stored password hash is not hex-encoded") from e
    if len(expected) != KEY_LENGTH:
        raise MalformedPasswordHashError(
            f"Stored password hash has {len(expected)} bytes, expected {KEY_LENGTH}"
        )
    try:
        _kdf(salt).verify(plain_password.encode("utf-8"), expected)
    except InvalidKey:
        return False
    return True


def _signer(secret: str) -> Signer:
    return Signer(secret, salt=SESSION_COOKIE_SALT)


def sign_session_id(sid: str, secret: str) -> str:
    """Return the cookie value for a session id (sid plus HMAC signature)."""
    return _signer(secret).sign(sid).decode("utf-8")


def unsign_session_id(cookie_value: str | None, secret: str) -> str | None:
    """Return the session id from a cookie value, or None if it is missing or tampered with."""
    if not cookie_value:
        return None
    try:
        return _signer(secret).unsign(cookie_value).decode("utf-8")
    except BadSignature:
        return None
