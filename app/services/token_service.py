# app/services/token_service.py
from datetime import datetime, timezone
import time

import jwt

from app.data.models.user import UserModel
from app.domain.errors import UnauthorizedError
from app.utils.settings import JWT_SECRET, JWT_ALGORITHM, JWT_ACCESS_EXPIRATION_MINUTES


class TokenTypes:
    ACCESS = "access"


def generate_token(user_id: int, expires: int, token_type: str, secret: str = JWT_SECRET) -> str:
    """
    Podpisany JWT z claimami:
    - sub: id uzytkownika
    - type: typ tokenu (access)
    - iat: czas wystawienia (epoch s)
    - exp: bezwzgledny czas wygasniecia (epoch s)
    """
    payload = {
        "sub": str(user_id),
        "type": token_type,
        "iat": int(time.time()),
        "exp": expires,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def generate_auth_tokens(user: UserModel) -> dict:
    access_expires = int(time.time()) + JWT_ACCESS_EXPIRATION_MINUTES * 60
    token = generate_token(user.id, access_expires, TokenTypes.ACCESS)

    return {
        "access": {
            "token": token,
            "expires": datetime.fromtimestamp(access_expires, tz=timezone.utc),
        }
    }


def verify_token(token: str, token_type: str = TokenTypes.ACCESS, secret: str = JWT_SECRET) -> dict:
    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.PyJWTError:
        raise UnauthorizedError("Please authenticate")

    if payload.get("type") != token_type or payload.get("sub") is None:
        raise UnauthorizedError("Please authenticate")

    return payload
