"""Document indexing pipeline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from docsearch.index.storage import SnapshotStore
from docsearch.index.termfreq import index_document, top_terms
from docsearch.ingestion.xml_loader import ExtractionError, extract_text
from docsearch.models import CorpusIndex, IndexStats
from docsearch.utils.files import iter_files

LOGGER = logging.getLogger(__name__)


class Indexer:
    """Builds a term-frequency index for a directory tree and persists it."""

    def __init__(self, store: SnapshotStore, *, top_n: int = 20) -> None:
        self.store = store
        self.top_n = top_n

    def index(self, root: Path) -> IndexStats:
        """Index every file under ``root`` and write a single snapshot.

        ``OSError`` from listing ``root`` or writing the snapshot propagates;
        nothing is written unless the whole walk completes.
        """
        corpus, stats = self.build(root)
        self.store.save(corpus)
        return stats

    def build(self, root: Path) -> Tuple[CorpusIndex, IndexStats]:
        """Walk ``root`` and return the in-memory index with run statistics."""
        corpus: CorpusIndex = {}
        stats = IndexStats()

        def on_dir_error(path: Path, exc: OSError) -> None:
            LOGGER.warning("Skipping directory %s: %s", path, exc)
            stats.increment("skipped_dir", path)

        for path in iter_files(Path(root), on_error=on_dir_error):
            LOGGER.info("Indexing %s...", path)
            status = self._index_single(path, corpus)
            stats.increment(status, path)

        LOGGER.info(
            "Indexed %d documents (%d failed, %d directories skipped)",
            stats.indexed,
            stats.failed,
            stats.skipped_dirs,
        )
        return corpus, stats

    def _index_single(self, path: Path, corpus: CorpusIndex) -> str:
        key = str(path)
        try:
            key.encode("utf-8")
        except UnicodeEncodeError:
            LOGGER.warning("Skipping %r: file name is not valid UTF-8", key)
            return "failed"

        try:
            text = extract_text(path)
        except ExtractionError as exc:
            LOGGER.warning("Failed to extract %s", exc)
            return "failed"

        tf = index_document(text)
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug("Top terms for %s: %s", path, top_terms(tf, self.top_n))
        corpus[key] = tf
        return "indexed"
