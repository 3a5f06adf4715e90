"""Inspection of persisted index snapshots."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

from docsearch.index.storage import SnapshotStore
from docsearch.index.termfreq import top_terms
from docsearch.models import CorpusIndex, IndexSummary

LOGGER = logging.getLogger(__name__)


def summarize(index: CorpusIndex, *, path: Path, top_n: int = 10) -> IndexSummary:
    totals: Counter[str] = Counter()
    for tf in index.values():
        totals.update(tf)
    return IndexSummary(
        path=Path(path),
        documents=len(index),
        unique_terms=len(totals),
        total_terms=sum(totals.values()),
        top_terms=top_terms(dict(totals), top_n),
    )


class Inspector:
    """High-level API to report on a saved index."""

    def __init__(self, store: SnapshotStore, *, top_n: int = 10) -> None:
        self.store = store
        self.top_n = top_n

    def inspect(self) -> IndexSummary:
        """Load the snapshot and summarize it; ``SnapshotError`` propagates."""
        LOGGER.info("Reading %s index file...", self.store.path)
        index = self.store.load()
        return summarize(index, path=self.store.path, top_n=self.top_n)
