# app/utils/security.py
import hashlib
import hmac
import os

_ITERATIONS = 100_000
_SALT_BYTES = 16


def hash_password(password: str, salt: bytes | None = None) -> str:
    """PBKDF2-SHA256, zapis w formacie `iteracje$sol_hex$hash_hex`."""
    salt = salt or os.urandom(_SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _ITERATIONS)
    return f"{_ITERATIONS}${salt.hex()}${digest.hex()}"


def verify_password(password: str, hashed: str) -> bool:
    try:
        iterations, salt_hex, digest_hex = hashed.split("$")
        salt = bytes.fromhex(salt_hex)
        iterations = int(iterations)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return hmac.compare_digest(candidate.hex(), digest_hex)
