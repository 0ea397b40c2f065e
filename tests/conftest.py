from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.data.models.product import ProductModel
from app.data.models.user import UserModel
from app.main import create_app
from app.services.token_service import generate_auth_tokens
from app.utils.security import hash_password
from app.utils.settings import DEFAULT_ADDRESS

PASSWORD = "password1"


@pytest.fixture
def app(tmp_path):
    application = create_app(database_url=f"sqlite:///{tmp_path / 'qkart-test.db'}")
    yield application
    application.state.database.dispose()


@pytest.fixture
def test_client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db(app):
    session = app.state.database.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def products(db):
    items = [
        ProductModel(id=1, name="Running Shoes", category="Fashion", cost=Decimal("50"), rating=5, image="shoes.png"),
        ProductModel(id=2, name="Badminton Racquet", category="Sports", cost=Decimal("100"), rating=5, image="racquet.png"),
        ProductModel(id=3, name="Weekender Duffle", category="Fashion", cost=Decimal("150"), rating=4, image="duffle.png"),
    ]
    db.add_all(items)
    db.commit()
    return items


def make_user(db, email, address="No. 1, Main Street, Bengaluru 560001", wallet_money=500):
    user = UserModel(
        name=email.split("@")[0],
        email=email,
        password=hash_password(PASSWORD),
        wallet_money=Decimal(wallet_money),
        address=address,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_cart(db, email, items):
    """items: lista (product_id, quantity) w kolejnosci dodania"""
    cart = CartModel(email=email, version=1)
    for product_id, quantity in items:
        cart.items.append(CartItemModel(product_id=product_id, quantity=quantity))
    db.add(cart)
    db.commit()
    db.refresh(cart)
    return cart


@pytest.fixture
def user_one(db):
    return make_user(db, "user-one@example.com")


@pytest.fixture
def user_two(db):
    # adres nieustawiony
    return make_user(db, "user-two@example.com", address=DEFAULT_ADDRESS)


@pytest.fixture
def user_one_token(user_one):
    return generate_auth_tokens(user_one)["access"]["token"]


@pytest.fixture
def user_two_token(user_two):
    return generate_auth_tokens(user_two)["access"]["token"]


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}
