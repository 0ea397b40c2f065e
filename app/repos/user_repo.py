from decimal import Decimal

from sqlalchemy import select, update
from sqlalchemy.orm import Session
from app.data.models.user import UserModel

class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_user_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def is_email_taken(self, email: str) -> bool:
        return self.get_user_by_email(email) is not None

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def set_address(self, user: UserModel, address: str) -> UserModel:
        user.address = address
        self.db.commit()
        self.db.refresh(user)
        return user

    def refresh(self, user: UserModel) -> UserModel:
        self.db.refresh(user)
        return user

    def rollback(self) -> None:
        self.db.rollback()

    def debit_wallet(self, user_id: int, amount: Decimal) -> int:
        """
        Atomowe odjecie kwoty z portfela, tylko gdy saldo wystarcza.
        UPDATE users SET wallet_money = wallet_money - :amount WHERE id = :id AND wallet_money >= :amount
        Nie commituje - zwraca rowcount, commit robi serwis.
        """
        result = self.db.execute(
            update(UserModel)
            .where(UserModel.id == user_id, UserModel.wallet_money >= amount)
            .values(wallet_money=UserModel.wallet_money - amount)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
