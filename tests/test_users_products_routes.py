from conftest import auth_header


class TestProducts:
    def test_lists_all_products(self, test_client, products):
        res = test_client.get("/v1/products")

        assert res.status_code == 200
        assert [p["id"] for p in res.json()] == [1, 2, 3]
        assert res.json()[0]["cost"] == 50.0

    def test_gets_single_product(self, test_client, products):
        res = test_client.get("/v1/products/3")

        assert res.status_code == 200
        assert res.json()["name"] == "Weekender Duffle"

    def test_unknown_product_returns_404(self, test_client, products):
        assert test_client.get("/v1/products/42").status_code == 404


class TestUsers:
    def test_gets_own_user(self, test_client, user_one, user_one_token):
        res = test_client.get(f"/v1/users/{user_one.id}", headers=auth_header(user_one_token))

        assert res.status_code == 200
        assert res.json()["email"] == user_one.email
        assert res.json()["walletMoney"] == 500.0

    def test_gets_address_only(self, test_client, user_one, user_one_token):
        res = test_client.get(
            f"/v1/users/{user_one.id}",
            params={"q": "address"},
            headers=auth_header(user_one_token),
        )

        assert res.status_code == 200
        assert res.json() == {"address": user_one.address}

    def test_other_user_is_forbidden(self, test_client, user_one, user_two, user_one_token):
        res = test_client.get(f"/v1/users/{user_two.id}", headers=auth_header(user_one_token))
        assert res.status_code == 403

    def test_sets_address(self, test_client, db, user_two, user_two_token):
        new_address = "221B Baker Street, London NW1 6XE"

        res = test_client.put(
            f"/v1/users/{user_two.id}",
            json={"address": new_address},
            headers=auth_header(user_two_token),
        )

        assert res.status_code == 200
        assert res.json() == {"address": new_address}
        db.refresh(user_two)
        assert user_two.address == new_address
        assert user_two.has_set_non_default_address()

    def test_short_address_returns_400(self, test_client, user_two, user_two_token):
        res = test_client.put(
            f"/v1/users/{user_two.id}",
            json={"address": "too short"},
            headers=auth_header(user_two_token),
        )
        assert res.status_code == 400


def test_health(test_client):
    assert test_client.get("/health").json() == {"status": "ok"}
