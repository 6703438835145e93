"""Tests for shopping list derivation."""

from __future__ import annotations

from pedal_inventory.catalog import Catalog
from pedal_inventory.shopping import compute_shopping_list


class TestShoppingList:
    def test_single_missing_component(self):
        catalog = Catalog(categories={"Diodes": ["1N4148"], "Transistors": ["BC548B"]})
        shopping = compute_shopping_list({"1N4148": 0, "BC548B": 5}, catalog)
        entries = list(shopping)
        assert len(entries) == 1
        assert entries[0].name == "1N4148"
        assert entries[0].category == "Diodes"
        assert entries[0].quantity == 0

    def test_membership_iff_non_positive(self, small_catalog):
        inv = {"100R": 1, "1K": 0, "10K": -2, "1N4148": 7, "BC548B": 0}
        shopping = compute_shopping_list(inv, small_catalog)
        for item in small_catalog.all_components():
            qty = inv.get(item.name, 0)
            assert (item.name in shopping.names()) == (qty <= 0)

    def test_catalog_order(self, small_catalog):
        shopping = compute_shopping_list({}, small_catalog)
        assert shopping.names() == small_catalog.component_names()

    def test_absent_entries_count_as_zero(self, small_catalog):
        shopping = compute_shopping_list({"100R": 3}, small_catalog)
        assert "1K" in shopping.names()
        assert "100R" not in shopping.names()

    def test_fully_stocked(self, small_catalog):
        inv = {name: 1 for name in small_catalog.component_names()}
        shopping = compute_shopping_list(inv, small_catalog)
        assert shopping.is_empty
        assert shopping.fully_stocked
        assert len(shopping) == 0
        assert not shopping

    def test_restartable(self, small_catalog):
        shopping = compute_shopping_list({}, small_catalog)
        assert list(shopping) == list(shopping)

    def test_unknown_inventory_keys_not_listed(self, small_catalog):
        shopping = compute_shopping_list({"Mystery": 0}, small_catalog)
        assert "Mystery" not in shopping.names()

    def test_to_list(self):
        catalog = Catalog(categories={"ICs": ["TL072CP"]})
        assert compute_shopping_list({}, catalog).to_list() == [
            {"name": "TL072CP", "category": "ICs", "quantity": 0}
        ]
