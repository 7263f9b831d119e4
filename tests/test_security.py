"""Unit tests for app.core.security: scrypt password hashing and session-cookie signing."""

import unittest

from app.core.security import (
    KEY_LENGTH,
    SALT_BYTES,
    MalformedPasswordHashError,
    hash_password,
    sign_session_id,
    _kdf,
    unsign_session_id,
    verify_password,
)

# Node: crypto.scryptSync("admin", "00112233445566778899aabbccddeeff", 64).toString("hex")
NODE_SALT = "00112233445566778899aabbccddeeff"
NODE_KEY_PREFIX = "40602ab0d986154ecfc28be1ddff6964"


class TestHashPassword(unittest.TestCase):
    """hash_password produces '<hex key>.<hex salt>' with a fresh salt each call."""

    def test_encoded_format(self) -> None:
        encoded = hash_password("correct horse")
        key_hex, sep, salt_hex = encoded.partition(".")
        self.assertEqual(sep, ".")
        self.assertEqual(len(key_hex), KEY_LENGTH * 2)
        self.assertEqual(len(salt_hex), SALT_BYTES * 2)
        bytes.fromhex(key_hex)
        bytes.fromhex(salt_hex)

    def test_same_password_hashes_differently(self) -> None:
        first = hash_password("same-password")
        second = hash_password("same-password")
        self.assertNotEqual(first, second)
        self.assertTrue(verify_password("same-password", first))
        self.assertTrue(verify_password("same-password", second))


class TestVerifyPassword(unittest.TestCase):
    """verify_password returns a bool for well-formed hashes and raises for malformed ones."""

    def test_matching_password(self) -> None:
        self.assertTrue(verify_password("s3cret-pass", hash_password("s3cret-pass")))

    def test_wrong_password(self) -> None:
        self.assertFalse(verify_password("other-pass", hash_password("s3cret-pass")))

    def test_case_matters(self) -> None:
        self.assertFalse(verify_password("Admin", hash_password("admin")))

    def test_unicode_password(self) -> None:
        encoded = hash_password("pässwörd-ünïcode")
        self.assertTrue(verify_password("pässwörd-ünïcode", encoded))
        self.assertFalse(verify_password("passwort-unicode", encoded))

    def test_missing_separator_raises(self) -> None:
        with self.assertRaises(MalformedPasswordHashError):
            verify_password("anything", "deadbeef")

    def test_empty_salt_raises(self) -> None:
        with self.assertRaises(MalformedPasswordHashError):
            verify_password("anything", "deadbeef.")

    def test_non_hex_key_raises(self) -> None:
        with self.assertRaises(MalformedPasswordHashError):
            verify_password("anything", "not-hex-at-all.00112233445566778899aabbccddeeff")

    def test_wrong_key_length_raises(self) -> None:
        with self.assertRaises(MalformedPasswordHashError):
            verify_password("anything", "abcd.00112233445566778899aabbccddeeff")

    def test_malformed_is_a_value_error(self) -> None:
        self.assertTrue(issubclass(MalformedPasswordHashError, ValueError))


class TestNodeCompatibility(unittest.TestCase):
    """Hashes written by the Node service use the salt hex text as scrypt salt and must keep verifying."""

    def test_known_vector(self) -> None:
        key = _kdf(NODE_SALT).derive(b"admin")
        self.assertTrue(key.hex().startswith(NODE_KEY_PREFIX))

        stored = f"{key.hex()}.{NODE_SALT}"
        self.assertTrue(verify_password("admin", stored))
        self.assertFalse(verify_password("Admin", stored))


class TestSessionCookieSigning(unittest.TestCase):
    """Session ids round-trip through the signed cookie value; tampering is rejected."""

    SECRET = "test-secret"

    def test_round_trip(self) -> None:
        value = sign_session_id("abc123", self.SECRET)
        self.assertNotEqual(value, "abc123")
        self.assertEqual(unsign_session_id(value, self.SECRET), "abc123")

    def test_tampered_value(self) -> None:
        value = sign_session_id("abc123", self.SECRET)
        self.assertIsNone(unsign_session_id("xyz789" + value[6:], self.SECRET))

    def test_unsigned_value(self) -> None:
        self.assertIsNone(unsign_session_id("abc123", self.SECRET))

    def test_other_secret(self) -> None:
        value = sign_session_id("abc123", self.SECRET)
        self.assertIsNone(unsign_session_id(value, "another-secret"))

    def test_missing_cookie(self) -> None:
        self.assertIsNone(unsign_session_id(None, self.SECRET))
        self.assertIsNone(unsign_session_id("", self.SECRET))


if __name__ == "__main__":
    unittest.main()
