# app/services/auth_service.py
from sqlalchemy.orm import Session

from app.data.models.user import UserModel
from app.domain.errors import UnauthorizedError
from app.repos.user_repo import UserRepo
from app.utils.security import verify_password
from app.utils.logging import get_logger

logger = get_logger(__name__)


class AuthService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def login_user_with_email_and_password(self, email: str, password: str) -> UserModel:
        user = self.repo.get_user_by_email(email)

        # ten sam komunikat dla zlego emaila i zlego hasla
        if not user or not verify_password(password, user.password):
            logger.info("Nieudana proba logowania")
            raise UnauthorizedError("Incorrect email or password")

        return user
