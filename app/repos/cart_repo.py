# app/repos/cart_repo.py
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_by_email(self, email: str) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.email == email)
        ).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.commit()
        self.db.refresh(cart)
        return cart

    def add_cart_item(self, cart: CartModel, item: CartItemModel) -> None:
        cart.items.append(item)

    def delete_cart_item(self, cart: CartModel, item: CartItemModel) -> None:
        # delete-orphan usuwa wiersz przy flushu
        cart.items.remove(item)

    def clear_cart_items(self, cart: CartModel) -> None:
        cart.items.clear()

    def update_cart_version(self, cart_id: int, old_version: int, new_data: dict) -> int:
        """
        Optimistic locking:
        UPDATE carts SET version = 2 WHERE id = 1 AND version = 1
        0 rows affected => ktos inny zmienil koszyk w miedzyczasie
        """
        self.db.flush()
        result = self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id, CartModel.version == old_version)
            .values(**new_data)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
