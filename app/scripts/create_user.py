"""
Create a dashboard user, or reset an existing user's password. Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [--admin] [--reset-password]
Example:
  python -m app.scripts.create_user editor 'a-long-secure-password' --admin
"""
import argparse
import sys

from app.core.config import get_settings
from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, USERNAME_MAX_LEN, hash_password
from app.services.storage import build_storage


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a dashboard user (there is no registration UI).")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars, case-sensitive)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("--admin", action="store_true", help="Allow the user to sign in to the dashboard")
    parser.add_argument(
        "--reset-password",
        action="store_true",
        help="If the user exists, replace its password instead of failing",
    )
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    settings = get_settings()
    if settings.STORAGE_BACKEND == "memory":
        print("STORAGE_BACKEND=memory keeps no users after this process exits; refusing.", file=sys.stderr)
        return 1

    storage = build_storage(settings)
    existing = storage.get_user_by_username(username)
    if existing:
        if not args.reset_password:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        storage.update_user_password(existing.id, hash_password(args.password))
        print(f"Password reset for user '{username}'.")
        return 0

    storage.create_user(username, hash_password(args.password), is_admin=args.admin)
    print(f"Created user '{username}' (admin={args.admin}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
