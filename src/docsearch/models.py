"""Core docsearch data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Tuple

TermFreq = Dict[str, int]
CorpusIndex = Dict[str, TermFreq]


class TokenKind(str, Enum):
    NUMERIC = "numeric"
    WORD = "word"
    SYMBOL = "symbol"


@dataclass(frozen=True, slots=True)
class Token:
    """Classified slice of a source string.

    Only offsets are stored; ``text`` slices the source on access.
    """

    source: str
    start: int
    end: int
    kind: TokenKind

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text


@dataclass(slots=True)
class IndexStats:
    indexed: int = 0
    failed: int = 0
    skipped_dirs: int = 0
    processed_files: List[Path] = field(default_factory=list)

    def increment(self, status: str, path: Path) -> None:
        if status == "indexed":
            self.indexed += 1
        elif status == "skipped_dir":
            self.skipped_dirs += 1
            return
        else:
            self.failed += 1
        self.processed_files.append(path)


@dataclass(slots=True)
class IndexSummary:
    """Summary statistics reported for a persisted index."""

    path: Path
    documents: int
    unique_terms: int = 0
    total_terms: int = 0
    top_terms: List[Tuple[str, int]] = field(default_factory=list)
