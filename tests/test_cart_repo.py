from storefront.repos.cart_repo import CartRepo


def test_adding_same_product_twice_merges_into_one_row(db, products):
    repo = CartRepo(db)
    first = repo.add_to_cart(user_id=1, product_id=products[0].id, quantity=2)
    second = repo.add_to_cart(user_id=1, product_id=products[0].id, quantity=3)

    assert second.id == first.id
    items = repo.get_cart_items(1)
    assert len(items) == 1
    assert items[0].quantity == 5


def test_same_product_for_different_users_are_separate_rows(db, products):
    repo = CartRepo(db)
    a = repo.add_to_cart(user_id=1, product_id=products[0].id, quantity=1)
    b = repo.add_to_cart(user_id=2, product_id=products[0].id, quantity=1)

    assert a.id != b.id
    assert [i.id for i in repo.get_cart_items(1)] == [a.id]
    assert [i.id for i in repo.get_cart_items(2)] == [b.id]


def test_add_does_not_check_product_existence(db):
    item = CartRepo(db).add_to_cart(user_id=1, product_id=4242, quantity=1)
    assert item.product_id == 4242


def test_cart_items_keep_insertion_order(db, products):
    repo = CartRepo(db)
    for p in reversed(products):
        repo.add_to_cart(user_id=1, product_id=p.id, quantity=1)

    assert [i.product_id for i in repo.get_cart_items(1)] == [p.id for p in reversed(products)]


def test_update_sets_quantity(db, products):
    repo = CartRepo(db)
    item = repo.add_to_cart(user_id=1, product_id=products[0].id, quantity=2)

    updated = repo.update_cart_item(item.id, 7)
    assert updated.quantity == 7
    assert repo.get_cart_items(1)[0].quantity == 7


def test_update_to_zero_or_negative_removes_row(db, products):
    repo = CartRepo(db)
    a = repo.add_to_cart(user_id=1, product_id=products[0].id, quantity=2)
    b = repo.add_to_cart(user_id=1, product_id=products[1].id, quantity=2)

    assert repo.update_cart_item(a.id, 0) is None
    assert repo.update_cart_item(b.id, -3) is None
    assert repo.get_cart_items(1) == []
    assert repo.get_cart_item_by_id(a.id) is None


def test_update_missing_row_returns_none(db):
    assert CartRepo(db).update_cart_item(999, 3) is None


def test_remove_reports_whether_row_existed(db, products):
    repo = CartRepo(db)
    item = repo.add_to_cart(user_id=1, product_id=products[0].id, quantity=1)

    assert repo.remove_cart_item(item.id) is True
    assert repo.remove_cart_item(item.id) is False


def test_clear_cart_only_touches_one_user_and_always_succeeds(db, products):
    repo = CartRepo(db)
    repo.add_to_cart(user_id=1, product_id=products[0].id, quantity=1)
    repo.add_to_cart(user_id=1, product_id=products[1].id, quantity=1)
    repo.add_to_cart(user_id=2, product_id=products[0].id, quantity=1)

    assert repo.clear_cart(1) is True
    assert repo.get_cart_items(1) == []
    assert len(repo.get_cart_items(2)) == 1
    # already empty
    assert repo.clear_cart(1) is True


def test_ids_are_not_reused_after_delete(db, products):
    repo = CartRepo(db)
    repo.add_to_cart(user_id=1, product_id=products[0].id, quantity=1)
    last = repo.add_to_cart(user_id=1, product_id=products[1].id, quantity=1)
    repo.remove_cart_item(last.id)

    fresh = repo.add_to_cart(user_id=1, product_id=products[2].id, quantity=1)
    assert fresh.id > last.id
