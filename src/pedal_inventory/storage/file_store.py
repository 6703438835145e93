"""JSON file key-value store.

Each key is stored as ``<root>/<key>.json``. Writes go through a temp file,
fsync and ``os.replace`` under a file lock, so a concurrent reader sees either
the previous snapshot or the new one, never a torn file.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from filelock import FileLock

from pedal_inventory.config.logging import get_logger
from pedal_inventory.exceptions import StorageUnavailableError, StorageWriteError

logger = get_logger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def _write_atomically(path: Path, content: str) -> None:
    """Write text to ``path`` via temp file + fsync + os.replace."""
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            pass
        raise


class JsonFileStore:
    """File-per-key store rooted at a data directory."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.root / f"{key}.json"

    def _lock_for(self, key: str) -> FileLock:
        return FileLock(str(self.root / f"{key}.lock"))

    def get(self, key: str) -> str | None:
        p = self.path_for(key)
        if not p.exists():
            return None
        try:
            with self._lock_for(key):
                return p.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageUnavailableError(f"Could not read {p}", str(e)) from e

    def set(self, key: str, value: str) -> None:
        p = self.path_for(key)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            with self._lock_for(key):
                _write_atomically(p, value)
        except OSError as e:
            raise StorageWriteError(f"Could not write {p}", str(e)) from e
        logger.debug("Wrote %s", p)
