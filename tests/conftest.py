"""Shared fixtures for docsearch tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Small corpus with a nested directory and one broken document."""
    root = tmp_path / "corpus"
    nested = root / "nested"
    nested.mkdir(parents=True)

    (root / "a.xml").write_text("<doc><p>hello hello world</p></doc>", encoding="utf-8")
    (root / "b.xml").write_text("<doc><p>world</p></doc>", encoding="utf-8")
    (root / "broken.xml").write_text("<doc><p>never closed</doc>", encoding="utf-8")
    (nested / "c.xhtml").write_text(
        "<html><body><h1>Nested</h1><p>Cat cat CAT 42</p></body></html>",
        encoding="utf-8",
    )
    return root
