from decimal import Decimal

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.data.models.user import UserModel
from app.domain.errors import ConflictError, InternalError, InvalidRequestError, NotFoundError
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.repos.user_repo import UserRepo
from app.utils.settings import DEFAULT_PAYMENT_OPTION
from app.utils.logging import get_logger

logger = get_logger(__name__)

NO_CART = "User does not have a cart"
PRODUCT_ALREADY_IN_CART = (
    "Product already in cart. Use the cart sidebar to update or remove product from cart"
)
PRODUCT_NOT_IN_DB = "Product doesn't exist in database"
PRODUCT_NOT_IN_CART = "Product not in cart"


class CartService:
    """
    Use case'y koszyka dla zalogowanego uzytkownika.
    query (get_cart_by_user) tylko odczyt
    commands (add, update, delete, checkout) koncza sie bumpem wersji koszyka
    (optimistic locking) i jednym commitem
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)
        self.users = UserRepo(db)

    #query
    def get_cart_by_user(self, user: UserModel) -> CartModel:
        cart = self.repo.get_cart_by_email(user.email)
        if not cart:
            raise NotFoundError(NO_CART)
        return cart

    #commands
    def add_product_to_cart(self, user: UserModel, product_id: int, quantity: int) -> CartModel:
        cart = self.repo.get_cart_by_email(user.email) or self._create_cart(user)

        if self._find_item(cart, product_id) is not None:
            raise InvalidRequestError(PRODUCT_ALREADY_IN_CART)

        product = self.products.get_product(product_id)
        if product is None:
            raise InvalidRequestError(PRODUCT_NOT_IN_DB)

        logger.info(f"Dodaje produkt {product_id} (x{quantity}) do koszyka {cart.id}")
        self.repo.add_cart_item(cart, CartItemModel(product=product, quantity=quantity))

        return self._save(cart)

    def update_product_in_cart(self, user: UserModel, product_id: int, quantity: int) -> CartModel:
        cart = self.repo.get_cart_by_email(user.email)
        if not cart:
            raise InvalidRequestError(
                "User does not have a cart. Use POST to create cart and add a product"
            )

        item = self._find_item(cart, product_id)
        if item is None:
            raise InvalidRequestError(PRODUCT_NOT_IN_CART)

        if self.products.get_product(product_id) is None:
            raise InvalidRequestError(PRODUCT_NOT_IN_DB)

        logger.info(
            f"Zmiana ilosci produktu {product_id} w koszyku {cart.id}: "
            f"{item.quantity} -> {quantity}"
        )
        # nadpisanie w miejscu, pozycja w koszyku bez zmian
        item.quantity = quantity

        return self._save(cart)

    def delete_product_from_cart(self, user: UserModel, product_id: int) -> CartModel:
        cart = self.repo.get_cart_by_email(user.email)
        if not cart:
            raise InvalidRequestError(NO_CART)

        item = self._find_item(cart, product_id)
        if item is None:
            raise InvalidRequestError(PRODUCT_NOT_IN_CART)

        logger.info(f"Usuwanie produktu {product_id} z koszyka {cart.id}")
        self.repo.delete_cart_item(cart, item)

        return self._save(cart)

    def checkout(self, user: UserModel) -> CartModel:
        cart = self.repo.get_cart_by_email(user.email)
        if not cart:
            raise NotFoundError(NO_CART)

        # kolejnosc walidacji: pusty koszyk -> adres -> saldo
        if not cart.items:
            raise InvalidRequestError("Cart is empty")

        if not user.has_set_non_default_address():
            raise InvalidRequestError("Address not set")

        total = self.cart_total(cart)
        if total > user.wallet_money:
            raise InvalidRequestError("Insufficient balance")

        logger.info(f"Checkout koszyka {cart.id} uzytkownika {user.id}, total {total}")

        # warunkowy debet, saldo moglo sie zmienic od odczytu
        if self.users.debit_wallet(user.id, total) == 0:
            self.repo.rollback()
            raise InvalidRequestError("Insufficient balance")

        self.repo.clear_cart_items(cart)

        # debet portfela i czyszczenie koszyka w jednej transakcji
        cart = self._save(cart)
        self.users.refresh(user)
        return cart

    @staticmethod
    def cart_total(cart: CartModel) -> Decimal:
        if any(item.product is None for item in cart.items):
            raise InvalidRequestError(PRODUCT_NOT_IN_DB)
        return sum(
            (Decimal(item.product.cost) * item.quantity for item in cart.items),
            Decimal("0.00"),
        )

    # helpers
    @staticmethod
    def _find_item(cart: CartModel, product_id: int) -> CartItemModel | None:
        for item in cart.items:
            if item.product_id == product_id:
                return item
        return None

    def _create_cart(self, user: UserModel) -> CartModel:
        try:
            cart = self.repo.create_cart(
                CartModel(email=user.email, payment_option=DEFAULT_PAYMENT_OPTION, version=1)
            )
        except SQLAlchemyError as e:
            self.repo.rollback()
            # rownolegle zapytanie moglo juz utworzyc koszyk dla tego emaila
            cart = self.repo.get_cart_by_email(user.email)
            if cart is None:
                logger.error(f"Nie udalo sie utworzyc koszyka dla uzytkownika {user.id}: {e}")
                raise InternalError() from e
            return cart

        logger.info(f"Utworzono nowy koszyk {cart.id} dla uzytkownika {user.id}")
        return cart

    def _save(self, cart: CartModel) -> CartModel:
        cart_id, version = cart.id, cart.version

        try:
            rowcount = self.repo.update_cart_version(
                cart_id=cart_id,
                old_version=version,
                new_data={"version": version + 1},
            )
        except IntegrityError as e:
            # unique (cart_id, product_id) - rownolegle dodanie tego samego produktu
            self.repo.rollback()
            logger.warning(f"Konflikt zapisu koszyka {cart_id}: {e.orig}")
            raise ConflictError("Cart was modified by another request") from e

        if rowcount == 0:
            self.repo.rollback()
            logger.warning(f"Konflikt wersji koszyka {cart_id} (oczekiwana {version})")
            raise ConflictError("Cart was modified by another request")

        self.repo.commit()
        logger.info(f"Koszyk {cart_id} zapisany, nowa wersja: {version + 1}")

        return self.repo.get_cart_by_email(cart.email)
