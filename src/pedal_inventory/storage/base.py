"""Storage contract and JSON load/save helpers.

Backends implement a two-method key-value protocol. Successful reads may come
back in several shapes (a raw string, a mapping with a ``value`` field, an
object with a ``value`` attribute); ``normalize_response`` collapses them to
``str | None`` so callers only ever see "present text" or "absent".

Loads never raise: absence, decode failures and backend errors all resolve to
the caller's fallback. Saves are best-effort and report success as a bool.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

from pedal_inventory.config.logging import get_logger
from pedal_inventory.exceptions import (
    StorageError,
    StorageParseError,
    StorageUnavailableError,
    StorageWriteError,
)

logger = get_logger(__name__)

T = TypeVar("T")


class KeyValueStore(Protocol):
    """Text blob storage keyed by string identifiers."""

    def get(self, key: str) -> Any:
        """Return the stored value for ``key`` or None when absent."""

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""


def normalize_response(raw: Any) -> str | None:
    """Collapse a backend response into optional text."""
    if raw is None:
        return None
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        return raw or None
    if isinstance(raw, Mapping):
        value = raw.get("value")
    else:
        value = getattr(raw, "value", None)
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    if isinstance(value, str) and value:
        return value
    return None


def read_value(store: KeyValueStore, key: str) -> str | None:
    """Read and normalize a value.

    Raises:
        StorageUnavailableError: If the backend fails to answer.
    """
    try:
        raw = store.get(key)
    except StorageError:
        raise
    except Exception as e:
        raise StorageUnavailableError(f"Could not read '{key}' from storage", str(e)) from e
    try:
        return normalize_response(raw)
    except UnicodeDecodeError as e:
        raise StorageParseError(f"Stored value for '{key}' is not valid UTF-8", str(e)) from e


def decode_json(key: str, text: str) -> Any:
    """Decode stored JSON text.

    Raises:
        StorageParseError: If the text is not valid JSON or nests too deeply.
    """
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        raise StorageParseError(f"Invalid JSON stored under '{key}'", str(e)) from e


def load_json(store: KeyValueStore, key: str, fallback: T) -> Any | T:
    """Load and decode ``key``, returning ``fallback`` on absence or any failure."""
    try:
        text = read_value(store, key)
        if text is None:
            logger.debug("No stored value for %s, using default", key)
            return fallback
        return decode_json(key, text)
    except StorageError as e:
        logger.warning("Failed to load %s, using default: %s", key, e)
        return fallback


def save_json(store: KeyValueStore, key: str, value: Any) -> bool:
    """Encode and write ``value`` under ``key``. Returns False if the write failed."""
    try:
        try:
            text = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageWriteError(f"Value for '{key}' is not serializable", str(e)) from e
        try:
            store.set(key, text)
        except StorageError:
            raise
        except Exception as e:
            raise StorageWriteError(f"Could not write '{key}' to storage", str(e)) from e
    except StorageError as e:
        logger.warning("Failed to save %s: %s", key, e)
        return False
    logger.debug("Saved %s (%d bytes)", key, len(text))
    return True
