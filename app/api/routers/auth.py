# app/api/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.errors import ApiError
from app.domain.schemas import AuthOut, LoginIn, RegisterIn
from app.services.auth_service import AuthService
from app.services.token_service import generate_auth_tokens
from app.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthOut, status_code=201)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    try:
        user = UserService(db).create_user(payload)
    except ApiError as e:
        if e.status_code == 200:
            # duplikat emaila: 200 + komunikat, bez usera i tokenow
            return JSONResponse(status_code=200, content={"code": 200, "message": e.message})
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {"user": user, "tokens": generate_auth_tokens(user)}


@router.post("/login", response_model=AuthOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    try:
        user = AuthService(db).login_user_with_email_and_password(payload.email, payload.password)
    except ApiError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {"user": user, "tokens": generate_auth_tokens(user)}
