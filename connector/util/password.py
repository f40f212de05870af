"""Password hashing utilities.

bcrypt salts every hash and embeds the work factor in the result, so
verification needs nothing but the stored hash. Passwords are truncated
to 72 bytes, bcrypt's input limit.
"""

import bcrypt

MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt."""
    pw_bytes = password.encode("utf-8")[:MAX_PASSWORD_BYTES]
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash.

    Returns False for hashes bcrypt cannot parse.
    """
    try:
        pw_bytes = password.encode("utf-8")[:MAX_PASSWORD_BYTES]
        return bcrypt.checkpw(pw_bytes, password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False
