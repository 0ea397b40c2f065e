"""
Checkout przez HTTP: PUT /v1/cart/checkout
Kazdy test sprawdza status i stan portfela/koszyka w bazie po requescie.
"""
from decimal import Decimal

from sqlalchemy import select

from app.data.models.cart import CartModel
from conftest import auth_header, make_cart, make_user


def _cart(db, email):
    db.expire_all()
    return db.execute(select(CartModel).where(CartModel.email == email)).scalar_one_or_none()


class TestCheckout:
    def test_returns_401_if_access_token_is_missing(self, test_client, db, user_one, products):
        make_cart(db, user_one.email, [(1, 2)])

        res = test_client.put("/v1/cart/checkout")

        assert res.status_code == 401
        db.refresh(user_one)
        assert user_one.wallet_money == Decimal("500")
        assert len(_cart(db, user_one.email).items) == 1

    def test_returns_401_for_garbage_token(self, test_client, user_one):
        res = test_client.put("/v1/cart/checkout", headers=auth_header("not-a-jwt"))
        assert res.status_code == 401

    def test_returns_404_if_user_has_no_cart(self, test_client, user_one_token):
        res = test_client.put("/v1/cart/checkout", headers=auth_header(user_one_token))

        assert res.status_code == 404
        assert res.json() == {"code": 404, "message": "User does not have a cart"}

    def test_returns_400_if_cart_is_empty(self, test_client, db, user_one, user_one_token):
        make_cart(db, user_one.email, [])

        res = test_client.put("/v1/cart/checkout", headers=auth_header(user_one_token))

        assert res.status_code == 400
        assert res.json()["message"] == "Cart is empty"
        db.refresh(user_one)
        assert user_one.wallet_money == Decimal("500")
        assert _cart(db, user_one.email).items == []

    def test_empty_cart_is_reported_before_missing_address(self, test_client, db, user_two, user_two_token):
        make_cart(db, user_two.email, [])

        res = test_client.put("/v1/cart/checkout", headers=auth_header(user_two_token))

        assert res.status_code == 400
        assert res.json()["message"] == "Cart is empty"

    def test_returns_400_if_address_is_not_set(self, test_client, db, user_two, user_two_token, products):
        make_cart(db, user_two.email, [(1, 1)])

        res = test_client.put("/v1/cart/checkout", headers=auth_header(user_two_token))

        assert res.status_code == 400
        assert res.json()["message"] == "Address not set"
        assert len(_cart(db, user_two.email).items) == 1

    def test_returns_400_if_not_enough_wallet_balance(self, test_client, db, products):
        user = make_user(db, "broke@example.com", wallet_money=0)
        token = test_client.post(
            "/v1/auth/login", json={"email": user.email, "password": "password1"}
        ).json()["tokens"]["access"]["token"]
        # 2 x 50 = 100
        make_cart(db, user.email, [(1, 2)])

        res = test_client.put("/v1/cart/checkout", headers=auth_header(token))

        assert res.status_code == 400
        assert res.json()["message"] == "Insufficient balance"
        db.refresh(user)
        assert user.wallet_money == Decimal("0")
        cart = _cart(db, user.email)
        assert [(i.product_id, i.quantity) for i in cart.items] == [(1, 2)]

    def test_returns_204_and_debits_exact_total(self, test_client, db, user_one, user_one_token, products):
        # 50 x 2 + 100 x 1 + 150 x 1 = 350
        make_cart(db, user_one.email, [(1, 2), (2, 1), (3, 1)])

        res = test_client.put("/v1/cart/checkout", headers=auth_header(user_one_token))

        assert res.status_code == 204
        assert res.content == b""
        db.refresh(user_one)
        assert user_one.wallet_money == Decimal("150")

        cart = _cart(db, user_one.email)
        assert cart is not None
        assert cart.items == []

    def test_checkout_with_total_equal_to_balance_succeeds(self, test_client, db, products):
        user = make_user(db, "exact@example.com", wallet_money=100)
        make_cart(db, user.email, [(2, 1)])
        token = test_client.post(
            "/v1/auth/login", json={"email": user.email, "password": "password1"}
        ).json()["tokens"]["access"]["token"]

        res = test_client.put("/v1/cart/checkout", headers=auth_header(token))

        assert res.status_code == 204
        db.refresh(user)
        assert user.wallet_money == Decimal("0")

    def test_second_checkout_reports_empty_cart(self, test_client, db, user_one, user_one_token, products):
        make_cart(db, user_one.email, [(1, 1)])
        headers = auth_header(user_one_token)

        assert test_client.put("/v1/cart/checkout", headers=headers).status_code == 204
        res = test_client.put("/v1/cart/checkout", headers=headers)

        assert res.status_code == 400
        db.refresh(user_one)
        assert user_one.wallet_money == Decimal("450")
