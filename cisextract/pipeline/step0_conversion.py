"""
STEP 0: CONVERSION

Converts the benchmark document to plain text and splits it into the table
of contents and the body.

Process:
1. Convert the input file to text (pdftotext, Docling or plain text)
2. Remove page markers ("17 | Page" and variants)
3. Split at the first two occurrences of "Overview":
   the ToC lies between them, the body follows the second one

Input: Path to the benchmark PDF (or pre-converted .txt)
Output: DocumentParts(toc, body)

Errors: ConversionError and DocumentStructureError are fatal.
"""

from dataclasses import dataclass
from pathlib import Path

from cisextract.config import PDF_CONVERTER, TOC_MARKER
from cisextract.parsers import ConversionError, get_parser
from cisextract.utils.cleanup.text_normalizer import cut_page_markers
from cisextract.utils.logging_config import log_step_start, logger


class DocumentStructureError(Exception):
    """Raised when the converted text does not follow the benchmark layout."""
    pass


@dataclass
class DocumentParts:
    """The two halves of a converted benchmark document."""

    toc: str
    body: str


def split_document(text: str, marker: str = TOC_MARKER) -> DocumentParts:
    """
    Split document text into ToC and body at the first two markers.

    Args:
        text: Full document text (page markers already removed)
        marker: Word introducing the ToC and the body

    Returns:
        DocumentParts

    Raises:
        DocumentStructureError: If the marker occurs fewer than two times

    Example:
        >>> parts = split_document("Title\\nOverview\\n1 Setup .. 5\\nOverview\\nBody")
        >>> parts.toc
        '\\n1 Setup .. 5\\n'
    """
    splits = text.split(marker, 2)
    if len(splits) < 3:
        raise DocumentStructureError(
            f"Expected '{marker}' to occur twice (before the ToC and before the body), "
            f"found {len(splits) - 1}"
        )
    return DocumentParts(toc=splits[1], body=splits[2])


def run(input_path: Path, converter: str = PDF_CONVERTER) -> DocumentParts:
    """
    Execute Step 0: Conversion.

    Args:
        input_path: Benchmark PDF or .txt file
        converter: PDF converter name ("pdftotext" or "docling")

    Returns:
        DocumentParts with ToC and body text

    Raises:
        ConversionError: If the document cannot be converted
        DocumentStructureError: If the ToC/body split fails
    """
    log_step_start("Step 0: Conversion")

    parser = get_parser(input_path, converter)
    result = parser.parse(input_path)
    logger.success(f"✓ Document converted ({result.parser_version}, {len(result.text):,} chars)")

    content = cut_page_markers(result.text)
    parts = split_document(content)
    logger.info(f"  ToC: {len(parts.toc):,} chars, body: {len(parts.body):,} chars")

    return parts


__all__ = [
    "ConversionError",
    "DocumentStructureError",
    "DocumentParts",
    "split_document",
    "run",
]
