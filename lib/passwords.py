# =============================================================================
# lib/passwords.py - Password Hashing
# =============================================================================
# Salted one-way hashing for stored credentials, using bcrypt.
# Only the hash is ever persisted; plaintext passwords are compared through
# bcrypt.checkpw and never written or logged.
# =============================================================================

import bcrypt

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    Hash a password with a fresh random salt.

    Returns:
        The bcrypt hash as text, safe to store in a document
    """
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt()).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("ascii"))
    except ValueError:
        # Stored value isn't a bcrypt hash
        return False
