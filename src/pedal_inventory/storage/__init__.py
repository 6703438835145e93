"""Key-value storage adapters for the persisted snapshots."""

from pedal_inventory.storage.base import (
    KeyValueStore,
    load_json,
    normalize_response,
    read_value,
    save_json,
)
from pedal_inventory.storage.file_store import JsonFileStore
from pedal_inventory.storage.memory_store import MemoryStore

__all__ = [
    "KeyValueStore",
    "JsonFileStore",
    "MemoryStore",
    "normalize_response",
    "read_value",
    "load_json",
    "save_json",
]
