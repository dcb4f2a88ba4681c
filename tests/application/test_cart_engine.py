"""Integration tests for the CartEngine use cases.

Every test runs against both cart sources: the cart stored with the
user record and the anonymous cookie cart.
"""

import pytest

from storefront.application.cookies import CART_COOKIE, CART_MAX_AGE
from storefront.domain.exceptions import NotFoundError, StorageError, ValidationError
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service.cart_pricing_service import CartPricingService
from tests.application.harness import EPHEMERAL, PERSISTED, CartHarness


@pytest.fixture(params=[PERSISTED, EPHEMERAL])
def harness(request) -> CartHarness:
    return CartHarness(request.param)


class TestAddItem:

    def test_first_add_creates_cart(self, harness):
        update = harness.add("1", 2)
        assert update.count == 2
        assert update.cart.total == Money.of("20.00")
        assert harness.stored().total == Money.of("20.00")

    def test_quantity_defaults_to_one(self, harness):
        assert harness.add("2").count == 1

    def test_same_product_accumulates(self, harness):
        harness.add("1", 2)
        update = harness.add("1", 3)
        assert len(update.cart.items) == 1
        assert update.cart.find("1").quantity == Quantity(5)
        assert update.cart.total == Money.of("50.00")

    def test_distinct_products_total(self, harness):
        harness.add("1", 2)
        harness.add("2", 1)
        update = harness.add("1", 1)
        assert update.cart.total == Money.of("35.00")

    def test_unknown_product_rejected(self, harness):
        harness.add("1", 1)
        with pytest.raises(NotFoundError, match="Product not found"):
            harness.add("404", 1)
        assert harness.stored().count == 1

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_non_positive_quantity_rejected(self, harness, quantity):
        with pytest.raises(ValidationError):
            harness.add("1", quantity)
        assert harness.stored().is_empty


class TestUpdateQuantity:

    def test_sets_absolute_quantity(self, harness):
        harness.add("1", 5)
        update = harness.update("1", 1)
        assert update.cart.find("1").quantity == Quantity(1)
        assert update.cart.total == Money.of("10.00")

    def test_recomputes_all_lines(self, harness):
        harness.add("1", 1)
        harness.add("2", 1)
        update = harness.update("2", 4)
        assert update.cart.total == Money.of("30.00")

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_below_one_rejected_and_cart_unchanged(self, harness, quantity):
        harness.add("1", 2)
        before = harness.stored()
        with pytest.raises(ValidationError, match="at least 1"):
            harness.update("1", quantity)
        assert harness.stored() == before

    def test_product_not_in_cart_rejected(self, harness):
        harness.add("1", 1)
        with pytest.raises(NotFoundError, match="not in the cart"):
            harness.update("2", 3)

    def test_validation_checked_before_lookup(self, harness):
        with pytest.raises(ValidationError):
            harness.update("2", 0)


class TestRemoveItem:

    def test_removes_line_and_recomputes(self, harness):
        harness.add("1", 2)
        harness.add("2", 1)
        update = harness.remove("1")
        assert update.cart.product_ids == ["2"]
        assert update.cart.total == Money.of("5.00")

    def test_absent_product_is_noop(self, harness):
        harness.add("1", 2)
        before = harness.stored()
        update = harness.remove("3")
        assert update.cart == before
        assert update.cookie is None
        assert harness.stored() == before

    def test_remove_from_empty_cart_is_noop(self, harness):
        assert harness.remove("1").cart.is_empty


class TestClear:

    def test_resets_items_and_total(self, harness):
        harness.add("1", 2)
        update = harness.clear()
        assert update.cart.is_empty
        assert update.cart.total == Money.zero()
        assert harness.stored().is_empty

    def test_idempotent(self, harness):
        harness.clear()
        assert harness.clear().cart.is_empty


class TestGetCount:

    def test_sums_quantities(self, harness):
        harness.add("1", 2)
        harness.add("2", 3)
        assert harness.engine.get_count(harness.stored()) == 5


class TestScenario:

    def test_add_add_update_remove(self, harness):
        update = harness.add("1", 2)
        assert (update.cart.total, update.count) == (Money.of("20.00"), 2)

        update = harness.add("1", 3)
        assert update.cart.find("1").quantity == Quantity(5)
        assert update.cart.total == Money.of("50.00")

        update = harness.update("1", 1)
        assert update.cart.find("1").quantity == Quantity(1)
        assert update.cart.total == Money.of("10.00")

        update = harness.remove("1")
        assert update.cart.items == ()
        assert update.cart.total == Money.of("0.00")


class TestNoDrift:

    def test_total_matches_recomputation_after_mixed_operations(self, harness):
        pricing = CartPricingService(harness.product_repo)
        operations = [
            ("add", "1", 2), ("add", "2", 1), ("add", "3", 4), ("update", "2", 3),
            ("add", "1", 1), ("remove", "3"), ("add", "3", 1), ("update", "1", 7),
            ("remove", "9"), ("add", "2", 2), ("remove", "1"),
        ]
        for op, *args in operations:
            getattr(harness, op)(*args)
            stored = harness.stored()
            assert stored.total == pricing.compute_total(stored)

        assert harness.stored().total == Money.of("27.50")

    def test_price_change_picked_up_on_next_mutation(self, harness):
        harness.add("1", 1)
        harness.add("2", 1)
        harness.product_repo.get_by_id("2").update_price(Money.of("6.00"))
        update = harness.add("1", 1)
        assert update.cart.total == Money.of("26.00")


class TestFailedMutationLeavesCartUntouched:

    def test_vanished_product_blocks_repricing(self, harness):
        harness.add("1", 1)
        harness.add("2", 1)
        before = harness.stored()
        del harness.product_repo._store["2"]

        with pytest.raises(NotFoundError, match="2"):
            harness.add("1", 1)
        with pytest.raises(NotFoundError, match="2"):
            harness.update("1", 3)
        with pytest.raises(NotFoundError, match="2"):
            harness.remove("1")

        assert harness.stored() == before

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda h: h.add("2", 1),
            lambda h: h.update("1", 4),
            lambda h: h.remove("1"),
        ],
        ids=["add", "update", "remove"],
    )
    def test_storage_failure_reaches_caller(self, mutate):
        harness = CartHarness(PERSISTED)
        harness.add("1", 2)
        before = harness.stored()
        harness.user_repo.fail_saves = 1

        with pytest.raises(StorageError, match="disk full"):
            mutate(harness)

        assert harness.stored() == before


class TestTamperedCookieTotal:

    def test_mutation_recomputes_client_total(self):
        harness = CartHarness(EPHEMERAL)
        harness.add("1", 1)
        harness.cookie = '{"items":[{"productId":"1","quantity":1}],"total":0.01}'

        assert harness.stored().total == Money.of("0.01")
        assert harness.add("2", 1).cart.total == Money.of("15.00")
        assert harness.stored().total == Money.of("15.00")


class TestWriteBack:

    def test_persisted_cart_saved_with_user(self):
        harness = CartHarness(PERSISTED)
        update = harness.add("1", 2)
        assert update.cookie is None
        assert harness.user_repo.get_by_id(1).cart.count == 2

    def test_cookie_cart_returns_set_cookie(self):
        harness = CartHarness(EPHEMERAL)
        update = harness.add("1", 2)
        assert update.cookie.name == CART_COOKIE
        assert update.cookie.max_age == CART_MAX_AGE
        assert harness.user_repo.get_by_id(1).cart.is_empty

    def test_cookie_cart_clear_deletes_cookie(self):
        harness = CartHarness(EPHEMERAL)
        harness.add("1", 2)
        update = harness.clear()
        assert update.cookie.is_delete
        assert harness.stored().is_empty
