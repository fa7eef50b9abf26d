"""
Parser Base Classes and Data Structures

Defines the abstract converter interface and result dataclass used by
Step 0 to turn a benchmark document into linear plain text.

All parser implementations (pdftotext, Docling, plain text) must inherit
from BaseParser and return a ParseResult containing:
- text: Full document text in reading order
- parser_version: Parser version for reproducibility
- num_pages: Total page count, if the converter reports it
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cisextract.utils.logging_config import logger


class ConversionError(Exception):
    """Raised when a document cannot be converted to text."""
    pass


@dataclass
class ParseResult:
    """
    Structured result from document conversion.

    Example:
        >>> result = parser.parse(pdf_path)
        >>> print(f"Converted {len(result.text):,} chars")
        >>> print(f"Parser version: {result.parser_version}")
    """

    text: str
    parser_version: str
    num_pages: Optional[int] = None

    def __post_init__(self):
        """Validate fields after initialization."""
        if not isinstance(self.text, str):
            raise TypeError("text must be a string")
        if not isinstance(self.parser_version, str) or not self.parser_version.strip():
            raise ValueError("parser_version must be a non-empty string")
        if self.num_pages is not None and (not isinstance(self.num_pages, int) or self.num_pages < 1):
            raise ValueError("num_pages must be a positive integer")


class BaseParser(ABC):
    """
    Abstract base class for document converters.

    The parser is responsible for:
    1. Validating that the input file exists
    2. Extracting the text in reading order
    3. Reporting version information for reproducibility

    Example:
        >>> class MyParser(BaseParser):
        ...     def parse(self, path: Path) -> ParseResult:
        ...         return ParseResult(text=..., parser_version="1.0")
        >>> result = MyParser().parse(Path("benchmark.pdf"))
    """

    def __init__(self):
        """Initialize the parser."""
        self.logger = logger.bind(parser=self.__class__.__name__)
        self.logger.debug(f"Initialized {self.__class__.__name__}")

    def _check_input(self, path: Path) -> None:
        if not path.exists():
            self.logger.error(f"Input not found: {path}")
            raise ConversionError(f"Input file not found at {path}")

    @abstractmethod
    def parse(self, path: Path) -> ParseResult:
        """
        Convert a document and return its text.

        Args:
            path: Path to the document

        Returns:
            ParseResult with the document text

        Raises:
            ConversionError: If the file is missing or conversion fails
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement parse() method"
        )
