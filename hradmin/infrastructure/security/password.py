"""Admin password hashing (bcrypt over a SHA-256 digest).

bcrypt only reads the first 72 bytes of its input; hashing the password
first gives it a fixed 44-byte input, so long passwords keep all their
characters.
"""

import base64
import hashlib

import bcrypt


def _bcrypt_input(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def get_password_hash(password: str) -> str:
    """Hash a password for the admin document's hashed_password field."""
    return bcrypt.hashpw(_bcrypt_input(password), bcrypt.gensalt()).decode("ascii")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash. Empty or malformed hashes never match."""
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(_bcrypt_input(plain_password), hashed_password.encode("ascii"))
    except (ValueError, UnicodeEncodeError):
        return False
