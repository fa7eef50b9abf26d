"""
Plain Text Parser

Reads a benchmark document that was already converted to text (for
example with `pdftotext -nopgbrk benchmark.pdf benchmark.txt`).
"""

from __future__ import annotations

from pathlib import Path

from .base import BaseParser, ConversionError, ParseResult


class TextFileParser(BaseParser):
    """Reads pre-converted UTF-8 text files."""

    def parse(self, path: Path) -> ParseResult:
        self._check_input(path)

        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            self.logger.error(f"Could not read {path}: {e}")
            raise ConversionError(f"Could not read {path}: {e}") from e

        self.logger.info(f"Read {len(text):,} chars from {path.name}")
        return ParseResult(text=text, parser_version="text")
