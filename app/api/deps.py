# app/api/deps.py
from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.errors import UnauthorizedError
from app.repos.user_repo import UserRepo
from app.services.token_service import verify_token

# auto_error=False: brak naglowka ma dac 401, nie domyslne 403
bearer = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
    db: Session = Depends(get_db),
) -> UserModel:
    """Uzytkownik z tokenu Bearer, zaladowany w sesji tego samego requestu."""
    if credentials is None:
        raise HTTPException(status_code=401, detail="Please authenticate")

    try:
        payload = verify_token(credentials.credentials)
        user = UserRepo(db).get_user(int(payload["sub"]))
    except UnauthorizedError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except ValueError:
        raise HTTPException(status_code=401, detail="Please authenticate")

    if user is None:
        raise HTTPException(status_code=401, detail="Please authenticate")

    return user
