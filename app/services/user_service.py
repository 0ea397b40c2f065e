from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.data.models.user import UserModel
from app.repos.user_repo import UserRepo
from app.domain.errors import ApiError, NotFoundError
from app.domain.schemas import RegisterIn
from app.utils.security import hash_password
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: RegisterIn) -> UserModel:
        if self.repo.is_email_taken(payload.email):
            # QKart zwraca 200 z komunikatem zamiast 409
            raise ApiError("Email already taken", status_code=200)

        user = UserModel(
            name=payload.name,
            email=payload.email,
            password=hash_password(payload.password),
        )
        try:
            created = self.repo.create_user(user)
        except IntegrityError:
            # rownolegla rejestracja tego samego emaila przeszla sprawdzenie wyzej
            self.repo.rollback()
            raise ApiError("Email already taken", status_code=200)

        logger.info(f"Zarejestrowano uzytkownika {created.id}")
        return created

    def get_user_by_id(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def get_user_by_email(self, email: str) -> UserModel | None:
        return self.repo.get_user_by_email(email)

    def get_user_address_by_id(self, user_id: int) -> dict:
        user = self.get_user_by_id(user_id)
        return {"address": user.address}

    def set_address(self, user: UserModel, address: str) -> str:
        updated = self.repo.set_address(user, address)
        logger.info(f"Uzytkownik {user.id} zmienil adres dostawy")
        return updated.address
