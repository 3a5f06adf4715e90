"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

from docsearch.config import DEFAULT_INDEX_PATH, AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        config = AppConfig()

        assert config.index_path == Path("index.json")
        assert config.index_path == DEFAULT_INDEX_PATH
        assert config.top_n == 20

    def test_custom_config(self) -> None:
        config = AppConfig(index_path=Path("/custom/index.json"), top_n=5)

        assert config.index_path == Path("/custom/index.json")
        assert config.top_n == 5

    def test_resolve_absolute(self) -> None:
        config = AppConfig(index_path=Path("/absolute/index.json"))

        assert config.resolve_index_path(Path("/base")) == Path("/absolute/index.json")

    def test_resolve_relative_no_base(self) -> None:
        config = AppConfig(index_path=Path("relative/index.json"))

        assert config.resolve_index_path(base_dir=None) == Path("relative/index.json")

    def test_resolve_relative_with_base(self) -> None:
        config = AppConfig(index_path=Path("relative/index.json"))

        resolved = config.resolve_index_path(base_dir=Path("/base/directory"))

        assert resolved == Path("/base/directory/relative/index.json")

    def test_resolve_default(self) -> None:
        config = AppConfig()

        assert config.resolve_index_path(base_dir=Path("/project")) == Path("/project/index.json")

