"""Password hashing (plain bcrypt).

Hashes live in the shared users table and are also verified by the auth
service, so no pre-hash is applied. bcrypt only accepts inputs up to 72
bytes; the password policy rejects anything longer before hashing.
"""

import bcrypt


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password."""
    try:
        return bool(
            bcrypt.checkpw(
                plain_password.encode("utf-8"),
                hashed_password.encode("utf-8"),
            )
        )
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Return a bcrypt hash of password (default cost)."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed.decode("utf-8")
