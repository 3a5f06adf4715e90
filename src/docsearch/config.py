"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_INDEX_PATH = Path("index.json")


@dataclass(slots=True)
class AppConfig:
    index_path: Path | None = None
    top_n: int = 20

    def __post_init__(self) -> None:
        if self.index_path is None:
            self.index_path = DEFAULT_INDEX_PATH

    def resolve_index_path(self, base_dir: Path | None = None) -> Path:
        if Path(self.index_path).is_absolute() or base_dir is None:
            return Path(self.index_path)
        return base_dir / self.index_path
