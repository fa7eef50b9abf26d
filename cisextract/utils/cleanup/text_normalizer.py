"""
Text Normalization for Extracted Content

Functions for cleaning the converted document text and the content of
rule sections. Page markers are removed from the whole document before
segmentation; section content is sanitized one section at a time.
"""

import re
from typing import Optional

from cisextract.models import FormatOptions


# Page footers such as "17 | Page"; PDF text extraction often breaks the word apart
PAGE_MARKER_PATTERN = re.compile(r'(\d+\s?\|\s?(?:Page|P a g e|P age|P a ge|Pa g e|Pag e))')

# Anything outside printable ASCII, except tab and line breaks
NON_TEXT_PATTERN = re.compile(r'[^\t\n\r\x20-\x7e]')

# Three or more consecutive line breaks
EXCESS_LINEBREAK_PATTERN = re.compile(r'(?:\r\n?|\n){3,}')

WHITESPACE_PATTERN = re.compile(r'\s+')


def cut_page_markers(text: str) -> str:
    """
    Remove all page markers from the document text.

    Example:
        >>> cut_page_markers("end of page\\n17 | P a g e\\nnext page")
        'end of page\\n\\nnext page'
    """
    return PAGE_MARKER_PATTERN.sub('', text)


def remove_non_text(text: str) -> str:
    """Strip characters outside the printable ASCII range (tabs and line breaks are kept)."""
    return NON_TEXT_PATTERN.sub('', text)


def reduce_linebreaks(text: str) -> str:
    """
    Collapse 3+ consecutive line breaks to exactly 2.

    Example:
        >>> reduce_linebreaks("Line 1\\n\\n\\n\\nLine 2")
        'Line 1\\n\\nLine 2'
    """
    return EXCESS_LINEBREAK_PATTERN.sub('\n\n', text)


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run, line breaks included, with a single space."""
    return WHITESPACE_PATTERN.sub(' ', text).strip()


def sanitize_section_content(
    content: str,
    chapter_cleanup: Optional[re.Pattern] = None,
    options: FormatOptions = FormatOptions(),
) -> str:
    """
    Clean the content of one rule section for output.

    Steps:
    1. Remove non-text characters
    2. Collapse 3+ line breaks to 2
    3. Remove a leaked chapter heading and everything after it
    4. Trim surrounding whitespace
    5. Optionally collapse all whitespace to single spaces

    Args:
        content: Raw section content
        chapter_cleanup: Pattern from the rule catalog, or None
        options: Formatting switches

    Returns:
        Sanitized content

    Example:
        >>> sanitize_section_content("None\\n\\n\\n\\n2 Services\\nText", re.compile(r'(2 Services)[\\s\\S]*'))
        'None'
    """
    content = remove_non_text(content)
    content = reduce_linebreaks(content)

    if chapter_cleanup is not None:
        content = chapter_cleanup.sub('', content)

    content = content.strip()

    if options.trim_breaks:
        content = collapse_whitespace(content)

    return content


__all__ = [
    'PAGE_MARKER_PATTERN',
    'cut_page_markers',
    'remove_non_text',
    'reduce_linebreaks',
    'collapse_whitespace',
    'sanitize_section_content',
]
