"""
pdftotext Parser Implementation

Uses poppler's pdftotext to extract the linear reading-order text of a
benchmark PDF. This is the layout the rule and section patterns expect:
one heading per line, blank lines between blocks, no page-break characters.

Requires poppler-utils installed and pdftotext on $PATH (or PDFTOTEXT_BINARY
set to its location).
"""

from __future__ import annotations

import re
import subprocess
from pathlib import Path

from cisextract.config import PDFTOTEXT_BINARY, PDFTOTEXT_TIMEOUT
from .base import BaseParser, ConversionError, ParseResult


VERSION_PATTERN = re.compile(r'pdftotext version (\S+)')


class PdfToTextParser(BaseParser):
    """
    pdftotext-based PDF converter.

    Example:
        >>> parser = PdfToTextParser()
        >>> result = parser.parse(Path("CIS_Ubuntu_Linux_22.04_Benchmark.pdf"))
        >>> print(result.text[:100])
    """

    def __init__(self, binary: str = PDFTOTEXT_BINARY, timeout: int = PDFTOTEXT_TIMEOUT) -> None:
        super().__init__()
        self._binary = binary
        self._timeout = timeout

    def version(self) -> str:
        """Return the installed pdftotext version, or "unknown"."""
        try:
            completed = subprocess.run(
                [self._binary, "-v"],
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            self.logger.debug(f"Could not determine pdftotext version: {e}")
            return "unknown"

        match = VERSION_PATTERN.search(completed.stdout + completed.stderr)
        return match.group(1) if match else "unknown"

    def parse(self, path: Path) -> ParseResult:
        """
        Convert a PDF to text with pdftotext.

        Args:
            path: Path to the PDF file

        Returns:
            ParseResult with the document text

        Raises:
            ConversionError: If the file is missing, pdftotext is not
                installed, times out or exits with an error
        """
        self._check_input(path)
        self.logger.info(f"Converting with pdftotext: {path.name}")

        command = [self._binary, "-q", "-nopgbrk", "-enc", "UTF-8", "-eol", "unix", str(path), "-"]
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                timeout=self._timeout,
            )
        except FileNotFoundError as e:
            self.logger.error(f"pdftotext not found: {self._binary}")
            raise ConversionError(
                f"pdftotext executable '{self._binary}' not found; install poppler-utils"
            ) from e
        except subprocess.TimeoutExpired as e:
            self.logger.error(f"pdftotext timed out after {self._timeout}s")
            raise ConversionError(f"pdftotext timed out after {self._timeout}s") from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            self.logger.error(f"pdftotext failed (exit {completed.returncode}): {stderr}")
            raise ConversionError(f"pdftotext failed with exit code {completed.returncode}: {stderr}")

        text = completed.stdout.decode("utf-8", errors="replace")
        self.logger.success(f"✓ Converted {len(text):,} chars")

        return ParseResult(text=text, parser_version=f"pdftotext {self.version()}")
