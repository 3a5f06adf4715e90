"""Markup text extraction.

Uses lxml's incremental parser with a target object so the document is
streamed from disk and only character data is kept. Tags, attributes,
comments and processing instructions never reach the output.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional

from lxml import etree

LOGGER = logging.getLogger(__name__)

READ_CHUNK_SIZE = 1 << 16


class ExtractionError(Exception):
    """A single document could not be read or parsed."""

    def __init__(
        self,
        path: Path,
        message: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.path = Path(path)
        self.message = message
        self.line = line
        self.column = column
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is not None:
            return f"{self.path}:{self.line}:{self.column or 0}: {self.message}"
        return f"{self.path}: {self.message}"


class _CharacterDataTarget:
    """Parser target collecting non-blank character data segments."""

    def __init__(self) -> None:
        self.parts: List[str] = []
        self._buffer: List[str] = []

    def _flush(self) -> None:
        if not self._buffer:
            return
        segment = "".join(self._buffer)
        self._buffer = []
        if segment.strip():
            self.parts.append(segment)

    def start(self, tag, attrib) -> None:
        self._flush()

    def end(self, tag) -> None:
        self._flush()

    def data(self, data: str) -> None:
        self._buffer.append(data)

    def comment(self, text) -> None:
        pass

    def pi(self, target, data=None) -> None:
        pass

    def close(self) -> None:
        self._flush()

    def drain(self) -> List[str]:
        parts, self.parts = self.parts, []
        return parts


def _make_parser(target: _CharacterDataTarget) -> etree.XMLParser:
    return etree.XMLParser(
        target=target,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
    )


def iter_text_parts(path: Path) -> Iterator[str]:
    """Yield character data segments of a markup file in document order.

    Raises ``ExtractionError`` when the file cannot be opened or read, or
    when the markup is not well formed.
    """
    path = Path(path)
    target = _CharacterDataTarget()
    parser = _make_parser(target)

    try:
        handle = path.open("rb")
    except OSError as exc:
        raise ExtractionError(path, f"could not open file: {exc}") from exc

    with handle:
        try:
            for chunk in iter(lambda: handle.read(READ_CHUNK_SIZE), b""):
                parser.feed(chunk)
                yield from target.drain()
            parser.close()
        except etree.XMLSyntaxError as exc:
            line, column = exc.position
            raise ExtractionError(path, exc.msg, line=line, column=column) from exc
        except OSError as exc:
            raise ExtractionError(path, f"could not read file: {exc}") from exc

    yield from target.drain()


def extract_text(path: Path) -> str:
    """Return all character data of ``path``, each segment followed by a space.

    Nothing is returned for a document that fails midway.
    """
    parts = list(iter_text_parts(path))
    LOGGER.debug("Extracted %d text segments from %s", len(parts), path)
    return "".join(f"{part} " for part in parts)
