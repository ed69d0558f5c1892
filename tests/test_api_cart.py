import pytest

from storefront.repos.cart_repo import CartRepo


def test_add_then_add_again_merges(client, products):
    pid = products[0].id
    first = client.post("/api/cart/1/add", json={"productId": pid, "quantity": 2})
    assert first.status_code == 201
    assert first.json() == {"id": first.json()["id"], "productId": pid, "userId": 1, "quantity": 2}

    second = client.post("/api/cart/1/add", json={"productId": pid, "quantity": 3})
    assert second.status_code == 201
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["quantity"] == 5

    cart = client.get("/api/cart/1").json()
    assert len(cart) == 1
    assert cart[0]["quantity"] == 5
    assert cart[0]["product"]["title"] == "Backpack"


def test_add_unknown_product_is_404(client, products):
    resp = client.post("/api/cart/1/add", json={"productId": 999, "quantity": 1})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Product not found"}


def test_add_with_non_positive_quantity_is_400(client, products):
    resp = client.post("/api/cart/1/add", json={"productId": products[0].id, "quantity": 0})
    assert resp.status_code == 400
    message = resp.json()["message"]
    assert message.startswith("Validation error")
    assert '"quantity"' in message


def test_add_with_missing_product_id_is_400(client, products):
    resp = client.post("/api/cart/1/add", json={"quantity": 1})
    assert resp.status_code == 400
    assert '"productId"' in resp.json()["message"]


def test_cart_of_non_numeric_user_is_400(client):
    resp = client.get("/api/cart/abc")
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid user ID"}


def test_empty_cart(client):
    resp = client.get("/api/cart/7")
    assert resp.status_code == 200
    assert resp.json() == []


def test_cart_row_without_product_has_null_product(client, db):
    CartRepo(db).add_to_cart(user_id=1, product_id=4242, quantity=1)

    cart = client.get("/api/cart/1").json()
    assert cart[0]["product"] is None
    assert cart[0]["quantity"] == 1


def test_update_quantity(client, products):
    item = client.post("/api/cart/1/add", json={"productId": products[0].id, "quantity": 1}).json()

    resp = client.put(f"/api/cart/update/{item['id']}", json={"quantity": 4})
    assert resp.status_code == 200
    assert resp.json()["quantity"] == 4


def test_update_missing_item_is_404(client):
    resp = client.put("/api/cart/update/999", json={"quantity": 4})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Cart item not found or removed"}


def test_update_to_zero_is_rejected(client, products):
    item = client.post("/api/cart/1/add", json={"productId": products[0].id, "quantity": 1}).json()

    resp = client.put(f"/api/cart/update/{item['id']}", json={"quantity": 0})
    assert resp.status_code == 400
    # row is untouched
    assert client.get("/api/cart/1").json()[0]["quantity"] == 1


def test_update_with_bad_item_id_is_400(client):
    resp = client.put("/api/cart/update/x", json={"quantity": 1})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid cart item ID"}


def test_remove_item(client, products):
    item = client.post("/api/cart/1/add", json={"productId": products[0].id, "quantity": 1}).json()

    resp = client.delete(f"/api/cart/remove/{item['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Item removed from cart"}
    assert client.get("/api/cart/1").json() == []

    again = client.delete(f"/api/cart/remove/{item['id']}")
    assert again.status_code == 404
    assert again.json() == {"message": "Cart item not found"}


HUGE = 99999999999999999999999


def test_add_product_id_beyond_integer_range_is_404(client, products):
    resp = client.post("/api/cart/1/add", json={"productId": HUGE, "quantity": 1})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Product not found"}


def test_user_id_beyond_integer_range_is_400(client, products):
    assert client.get(f"/api/cart/{HUGE}").json() == {"message": "Invalid user ID"}
    resp = client.post(f"/api/cart/{HUGE}/add", json={"productId": products[0].id, "quantity": 1})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid user ID"}


def test_update_item_id_beyond_integer_range_is_404(client):
    resp = client.put(f"/api/cart/update/{HUGE}", json={"quantity": 2})
    assert resp.status_code == 404


def test_remove_item_id_beyond_integer_range_is_404(client):
    resp = client.delete(f"/api/cart/remove/{HUGE}")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Cart item not found"}


def test_quantity_beyond_integer_range_is_400(client, products):
    resp = client.post("/api/cart/1/add", json={"productId": products[0].id, "quantity": HUGE})
    assert resp.status_code == 400


@pytest.mark.parametrize(
    "body",
    [
        {"productId": "1", "quantity": 3},
        {"productId": 1, "quantity": "3"},
        {"productId": True, "quantity": 1},
        {"productId": 1, "quantity": True},
    ],
)
def test_add_requires_real_numbers(client, products, body):
    resp = client.post("/api/cart/1/add", json=body)
    assert resp.status_code == 400
    assert resp.json()["message"].startswith("Validation error")
    assert client.get("/api/cart/1").json() == []


@pytest.mark.parametrize("quantity", ["4", True])
def test_update_requires_real_number(client, products, quantity):
    item = client.post("/api/cart/1/add", json={"productId": products[0].id, "quantity": 1}).json()

    resp = client.put(f"/api/cart/update/{item['id']}", json={"quantity": quantity})
    assert resp.status_code == 400
    assert client.get("/api/cart/1").json()[0]["quantity"] == 1
