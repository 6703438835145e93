"""Tests for the component catalog."""

from __future__ import annotations

import pytest

from pedal_inventory.catalog import Catalog, load_catalog
from pedal_inventory.exceptions import CatalogError


class TestCatalog:
    def test_all_components_length_is_sum_of_categories(self, small_catalog):
        expected = sum(len(v) for v in small_catalog.categories.values())
        assert len(small_catalog.all_components()) == expected

    def test_all_components_category_then_item_order(self, small_catalog):
        items = small_catalog.all_components()
        assert [c.name for c in items] == [
            "100R",
            "1K",
            "10K",
            "1N4148",
            "1N914",
            "BC548B",
            "2N5088",
        ]
        assert items[0].category == "Resistors"
        assert items[3].category == "Diodes"
        assert items[-1].category == "Transistors"

    def test_default_inventory_all_zero(self, small_catalog):
        inv = small_catalog.default_inventory()
        assert list(inv) == small_catalog.component_names()
        assert set(inv.values()) == {0}

    def test_category_of(self, small_catalog):
        assert small_catalog.category_of("1N914") == "Diodes"
        assert small_catalog.category_of("nope") is None

    def test_contains(self, small_catalog):
        assert "BC548B" in small_catalog
        assert "LM308" not in small_catalog

    def test_empty_catalog(self):
        c = Catalog()
        assert c.all_components() == []
        assert c.default_inventory() == {}

    def test_from_mapping_rejects_non_mapping(self):
        with pytest.raises(CatalogError):
            Catalog.from_mapping(["100R"])

    def test_from_mapping_rejects_non_list_category(self):
        with pytest.raises(CatalogError):
            Catalog.from_mapping({"Resistors": "100R"})

    def test_from_mapping_stringifies_names(self):
        c = Catalog.from_mapping({"Resistors": [100, "1K"]})
        assert c.categories == {"Resistors": ["100", "1K"]}


class TestLoadCatalog:
    def test_bundled_catalog(self):
        c = load_catalog()
        assert list(c.categories)[0] == "Resistors"
        assert c.all_components()[0].name == "100R"
        assert "1N4148" in c
        assert c.category_of("TL072CP") == "ICs"
        assert c.categories["Hardware"][-1] == "Yellow MXR knob"

    def test_bundled_catalog_lists_shared_name_twice(self):
        c = load_catalog()
        names = c.component_names()
        assert names.count("220nF") == 2
        # Shared names collapse to one inventory entry
        assert len(c.default_inventory()) == len(names) - 1

    def test_load_from_file(self, tmp_path):
        p = tmp_path / "catalog.yaml"
        p.write_text("Fuzz Parts:\n  - AC128\n  - 100K\n", encoding="utf-8")
        c = load_catalog(p)
        assert c.categories == {"Fuzz Parts": ["AC128", "100K"]}

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        p = tmp_path / "bad.yaml"
        p.write_text("Resistors: [100R\n", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(p)
