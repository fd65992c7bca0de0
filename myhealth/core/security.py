"""
Password hashing helpers (bcrypt).
"""

import bcrypt

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(plain: str) -> bytes:
    return plain.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain: str, rounds: int = 10) -> str:
    """
    Hash a plaintext password with a fresh salt.

    Args:
        plain: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash as text, safe to store
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(plain), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(plain), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False
