# =============================================================================
# tests/test_product_store.py - Record Store Tests
# =============================================================================

import math

import pytest
from pydantic import ValidationError as PydanticValidationError

from product_catalog_api.app.core.errors import NotFoundError
from product_catalog_api.app.schemas.product import Product
from product_catalog_api.app.services.product_store import ProductStore, coerce_flag


# =============================================================================
# Flag Coercion
# =============================================================================

class TestCoerceFlag:
    """Test JSON-truthiness coercion of inStock."""

    @pytest.mark.parametrize("value", [None, False, 0, 0.0, "", math.nan])
    def test_falsy_values(self, value):
        assert coerce_flag(value) is False

    @pytest.mark.parametrize("value", [True, 1, -2, 0.5, "false", "0", [], {}])
    def test_truthy_values(self, value):
        assert coerce_flag(value) is True


# =============================================================================
# CRUD
# =============================================================================

class TestInsert:
    def test_insert_assigns_fresh_id(self, store, make_draft):
        product = store.insert(make_draft())
        assert product.id not in {"1", "2", "3"}
        assert store.get(product.id) == product

    def test_ids_unique_across_inserts(self, empty_store, make_draft):
        ids = {empty_store.insert(make_draft(name=f"Item {i}")).id for i in range(50)}
        assert len(ids) == 50

    def test_insert_normalizes(self, empty_store, make_draft):
        product = empty_store.insert(
            make_draft(name="  Mouse ", description=" Wireless\t", category=" electronics ", in_stock=None)
        )
        assert product.name == "Mouse"
        assert product.description == "Wireless"
        assert product.category == "electronics"
        assert product.in_stock is False

    def test_insert_appends_in_order(self, store, make_draft):
        product = store.insert(make_draft())
        assert [p.id for p in store.list()] == ["1", "2", "3", product.id]

    def test_id_factory_collision_is_skipped(self, make_draft):
        ids = iter(["1", "1", "2"])
        store = ProductStore(id_factory=lambda: next(ids))
        first = store.insert(make_draft())
        second = store.insert(make_draft())
        assert (first.id, second.id) == ("1", "2")


class TestGet:
    def test_get_existing(self, store):
        assert store.get("2").name == "Smartphone"

    def test_get_missing_raises(self, store):
        with pytest.raises(NotFoundError, match="Product with ID 999 not found"):
            store.get("999")


class TestReplace:
    def test_replace_keeps_id_and_position(self, store, make_draft):
        updated = store.replace("2", make_draft(name="Phone", price=700, in_stock=0))
        assert updated.id == "2"
        assert updated.name == "Phone"
        assert updated.price == 700
        assert updated.in_stock is False
        assert [p.id for p in store.list()] == ["1", "2", "3"]
        assert store.get("2") == updated

    def test_replace_missing_raises(self, store, make_draft):
        with pytest.raises(NotFoundError):
            store.replace("999", make_draft())
        assert len(store) == 3


class TestRemove:
    def test_remove_returns_record(self, store):
        removed = store.remove("3")
        assert removed.name == "Coffee Maker"
        assert len(store) == 2

    def test_get_after_remove_fails(self, store):
        store.remove("1")
        with pytest.raises(NotFoundError):
            store.get("1")

    def test_remove_missing_raises(self, store):
        with pytest.raises(NotFoundError):
            store.remove("999")


class TestList:
    def test_snapshot_is_isolated(self, store, make_draft):
        snapshot = store.list()
        store.insert(make_draft())
        store.remove("1")
        assert [p.id for p in snapshot] == ["1", "2", "3"]

    def test_predicate(self, store):
        assert [p.id for p in store.list(lambda p: p.price < 1000)] == ["2", "3"]

    def test_records_are_immutable(self, store):
        product = store.get("1")
        with pytest.raises(PydanticValidationError):
            product.name = "Changed"


class TestSeed:
    def test_duplicate_ids_rejected(self):
        product = Product(id="1", name="A", description="B", price=1, category="c")
        with pytest.raises(ValueError):
            ProductStore([product, product])

    def test_clear(self, store):
        store.clear()
        assert store.list() == []


# =============================================================================
# Stats
# =============================================================================

class TestStats:
    def test_sample_stats(self, store):
        stats = store.stats()
        assert stats.total_products == 3
        assert stats.total_in_stock == 2
        assert stats.total_out_of_stock == 1
        assert stats.categories == {"electronics": 2, "kitchen": 1}
        assert stats.price_stats.min == 50
        assert stats.price_stats.max == 1200
        assert stats.price_stats.avg == pytest.approx(2050 / 3)

    def test_empty_store(self, empty_store):
        stats = empty_store.stats()
        assert stats.total_products == 0
        assert stats.total_in_stock == 0
        assert stats.total_out_of_stock == 0
        assert stats.categories == {}
        assert stats.price_stats.min is None
        assert stats.price_stats.max is None
        assert stats.price_stats.avg is None
