"""Snapshot of each set's current slide index across process restarts.

File layout::

    {"sets": {"main": 3, "room-b": 0}, "timestamp": "2025-01-01T10:00:00+00:00"}

Reads and writes never raise: a missing or corrupt snapshot means every set
starts at slide 0, and a failed write is logged and otherwise ignored.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from django.utils import timezone

from .exceptions import PersistenceError

logger = logging.getLogger(__name__)


class SnapshotGateway:
    def __init__(self, path: str | Path | None):
        self.path = Path(path) if path else None

    def load(self) -> dict[str, int]:
        if self.path is None:
            return {}
        try:
            return self._read()
        except FileNotFoundError:
            logger.info("No state snapshot at %s, starting every set at slide 0", self.path)
        except PersistenceError:
            logger.warning("Ignoring invalid state snapshot at %s", self.path, exc_info=True)
        except OSError:
            logger.exception("Error loading state snapshot from %s", self.path)
        return {}

    def save(self, indices: dict[str, int]) -> bool:
        if self.path is None:
            return False
        try:
            self._write(indices)
        except (OSError, TypeError, ValueError):
            logger.exception("Error saving state snapshot to %s", self.path)
            return False
        return True

    def _read(self) -> dict[str, int]:
        assert self.path is not None  # noqa: S101
        raw = self.path.read_text(encoding="utf-8")
        try:
            data = json.loads(raw)
        except ValueError as exc:
            msg = f"snapshot is not valid JSON: {exc}"
            raise PersistenceError(msg) from exc

        sets = data.get("sets") if isinstance(data, dict) else None
        if not isinstance(sets, dict):
            msg = "snapshot has no 'sets' mapping"
            raise PersistenceError(msg)

        indices: dict[str, int] = {}
        for set_id, index in sets.items():
            if isinstance(index, int) and not isinstance(index, bool) and index >= 0:
                indices[str(set_id)] = index
        return indices

    def _write(self, indices: dict[str, int]) -> None:
        assert self.path is not None  # noqa: S101
        document = {
            "sets": dict(indices),
            "timestamp": timezone.now().isoformat(),
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write-then-rename so a crash mid-write never leaves a truncated file.
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh)
            Path(tmp_name).replace(self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
