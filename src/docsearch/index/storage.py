"""JSON snapshot persistence for the corpus index."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict

from pydantic import ConfigDict, PositiveInt, TypeAdapter, ValidationError

from docsearch.models import CorpusIndex

LOGGER = logging.getLogger(__name__)

_SNAPSHOT_ADAPTER = TypeAdapter(
    Dict[str, Dict[str, PositiveInt]], config=ConfigDict(strict=True)
)


class SnapshotError(Exception):
    """A persisted index could not be loaded."""


class SnapshotStore:
    """Reads and writes a corpus index as a single JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def save(self, index: CorpusIndex) -> None:
        """Write ``index`` atomically, replacing any previous snapshot.

        ``OSError`` propagates to the caller.
        """
        payload = _SNAPSHOT_ADAPTER.dump_json(index)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        LOGGER.info("Saved %d documents to %s", len(index), self.path)

    def load(self) -> CorpusIndex:
        """Load and validate the snapshot."""
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise SnapshotError(f"could not read {self.path}: {exc}") from exc

        try:
            return _SNAPSHOT_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            raise SnapshotError(
                f"invalid index snapshot {self.path}: {exc.error_count()} error(s)\n{exc}"
            ) from exc
