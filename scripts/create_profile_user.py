"""Insert a users row for local development and print a bearer token for it.

Usage:
    python -m scripts.create_profile_user <username> [password]
If password is omitted, a random one is printed. The users table must exist.
"""

import asyncio
import secrets
import sys
import uuid

from profile_api.infrastructure.persistence.database import _ensure_engine, dispose_engine
from profile_api.infrastructure.persistence.models import User
from profile_api.infrastructure.security import create_access_token, get_password_hash


async def main() -> None:
    """Create the user row, then print its password and an access token."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.create_profile_user <username> [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    user_id = str(uuid.uuid4())
    username = sys.argv[1]
    password = sys.argv[2] if len(sys.argv) > 2 else secrets.token_urlsafe(12) + "!A1"

    session_factory = _ensure_engine()
    try:
        async with session_factory() as session:
            async with session.begin():
                session.add(
                    User(
                        id=user_id,
                        username=username,
                        email=f"{username}@example.com",
                        password_hash=get_password_hash(password),
                        first_name=username.capitalize(),
                        last_name="Dev",
                        role="server",
                    )
                )
    finally:
        await dispose_engine()

    print(f"Created user: {user_id} ({username})")
    print(f"Password: {password}")
    print(f"Token: {create_access_token({'sub': user_id, 'username': username})}")


if __name__ == "__main__":
    asyncio.run(main())
