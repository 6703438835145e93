"""Shared fixtures for pedal-inventory tests."""

from __future__ import annotations

import pytest

from pedal_inventory.catalog import Catalog
from pedal_inventory.storage import MemoryStore


@pytest.fixture
def small_catalog() -> Catalog:
    """Three small categories with distinct names."""
    return Catalog(
        categories={
            "Resistors": ["100R", "1K", "10K"],
            "Diodes": ["1N4148", "1N914"],
            "Transistors": ["BC548B", "2N5088"],
        }
    )


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()
