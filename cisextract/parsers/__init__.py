"""
Parser Module for the CIS Benchmark Rule Extractor

Provides converters turning benchmark documents into plain text:
- PdfToTextParser (poppler pdftotext, default)
- DoclingParser (IBM Docling, optional "docling" extra)
- TextFileParser (pre-converted .txt input)
"""

from pathlib import Path

from cisextract.config import PDF_CONVERTER
from cisextract.parsers.base import BaseParser, ConversionError, ParseResult
from cisextract.parsers.pdftotext_parser import PdfToTextParser
from cisextract.parsers.text_parser import TextFileParser


def get_parser(path: Path, converter: str = PDF_CONVERTER) -> BaseParser:
    """
    Select the converter for an input file.

    Text files are read as-is; everything else goes through the configured
    PDF converter.

    Raises:
        ConversionError: If the converter name is unknown
    """
    if path.suffix.lower() == ".txt":
        return TextFileParser()
    if converter == "pdftotext":
        return PdfToTextParser()
    if converter == "docling":
        from cisextract.parsers.docling_parser import DoclingParser
        return DoclingParser()
    raise ConversionError(f"Unknown converter: {converter}")


__all__ = [
    "BaseParser",
    "ConversionError",
    "ParseResult",
    "PdfToTextParser",
    "TextFileParser",
    "get_parser",
]
