# foodpos/core/security.py
import hashlib


def hash_password(password: str) -> str:
    """SHA-256 hex digest, the same function used when an instrument is enrolled."""
    if password is None:
        raise ValueError("Password cannot be None")
    return hashlib.sha256(password.encode("utf-8")).hexdigest()
