"""
Heading Pattern Detection Utilities

Provides the regex patterns and classification helpers for rule headings in
CIS Benchmark documents. Used by Step 1 (ToC titles) and Step 2 (body
headings and section labels).

Key Functions:
- split_title: Split a ToC title into ID and name, detect rule status
- get_all_titles_content: Find rule headings in the document body
- section_key_name: Normalize a section label to its output key
- build_section_pattern: Alternation over the fixed section labels
"""

import re
from typing import List, Optional

from cisextract.config import (
    AUTOMATED_STATUS_SUFFIXES,
    RULE_STATUS_SUFFIXES,
    SECTION_LABELS,
)
from cisextract.models import BodyHeading, ClassifiedTitle
from cisextract.utils.logging_config import logger


# Splits a title into dotted numeric ID and name
TITLE_ID_PATTERN = re.compile(r'^(\d+(?:\.\d+)*)\.?\s*(.*)$', re.DOTALL)

# General purpose
WHITESPACE_PATTERN = re.compile(r'\s+')

# Rule headings in the body. They differ from the ToC: wrapped over up to four
# lines and ending with a status marker, e.g.
#   "1.1.1 Ensure mounting of cramfs filesystems is disabled\n(Automated)"
BODY_TITLE_PATTERN = re.compile(
    r'(?<=\n\n)'
    r'(\d+(?:\.\d+)*) '
    r'(?:.*(?:\n.*){0,3}|.*\n)'
    r'(?:\(Automated|Manual|Scored|Not Scored)\)'
    r'(?=\n(?!\.))'
)

# Dotted IDs at the start of a line inside a captured body heading
LEADING_ID_PATTERN = re.compile(r'^\d+(?:\.\d+)* ', re.MULTILINE)


def normalize_whitespace(text: str) -> str:
    """
    Collapse whitespace runs (including line breaks) to single spaces and trim.

    Example:
        >>> normalize_whitespace("  1.2.3 \\n Ensure   cramfs  ")
        '1.2.3 Ensure cramfs'
    """
    return WHITESPACE_PATTERN.sub(' ', text).strip()


def _status_suffix(title: str) -> Optional[str]:
    for suffix in RULE_STATUS_SUFFIXES:
        if title.endswith(suffix):
            return suffix
    return None


def split_title(title: str) -> Optional[ClassifiedTitle]:
    """
    Split a cropped ToC title into ID and name and classify it.

    A title ending in one of the status suffixes ("(Automated)", "(Scored)",
    "(Manual)", "(Not Scored)") is an actual rule; "(Automated)" and
    "(Scored)" additionally mark it as automated. Titles without a suffix
    are structural chapters.

    Args:
        title: Cropped title string (see toc_parser.crop_titles)

    Returns:
        ClassifiedTitle, or None if the title has no leading dotted ID

    Example:
        >>> split_title("1.1 Some Control (Automated)")
        ClassifiedTitle(id='1.1', name='Some Control', is_rule=True, automated=True)
        >>> split_title("1 Initial Setup").is_rule
        False
    """
    title = title.strip()
    is_rule = False
    automated = False

    suffix = _status_suffix(title)
    if suffix:
        is_rule = True
        automated = suffix in AUTOMATED_STATUS_SUFFIXES
        title = title[:-len(suffix)]

    match = TITLE_ID_PATTERN.match(title)
    if not match:
        logger.warning(f"Failed to split title into id and name: {title!r}")
        return None

    return ClassifiedTitle(
        id=normalize_whitespace(match.group(1)),
        name=normalize_whitespace(match.group(2)),
        is_rule=is_rule,
        automated=automated,
    )


def get_all_titles_content(content: str) -> List[BodyHeading]:
    """
    Find all rule headings in the document body.

    Body headings differ from their ToC titles in line wrapping and carry a
    status marker. A parent chapter heading sitting right above a rule can be
    captured together with it; when a match contains more than one
    line-leading dotted ID, it is cut to start at the second one.

    Args:
        content: Body text of the document

    Returns:
        Headings in document order, each with its offset in content
    """
    headings = []

    for match in BODY_TITLE_PATTERN.finditer(content):
        text = match.group(0)
        start = match.start()

        ids = list(LEADING_ID_PATTERN.finditer(text))
        if len(ids) > 1:
            cut = ids[1].start()
            logger.debug(f"Dropping leaked parent heading {text[:cut].strip()!r}")
            text = text[cut:]
            start += cut

        headings.append(BodyHeading(text=text, start=start))

    logger.debug(f"Found {len(headings)} rule headings in document body")
    return headings


def section_key_name(label: str) -> str:
    """
    Normalize a section label to its output key.

    Idempotent: normalizing a key returns it unchanged.

    Example:
        >>> section_key_name("Default Value:")
        'default_value'
        >>> section_key_name("default_value")
        'default_value'
    """
    key = label.strip(" :\t\r\n").lower()
    return WHITESPACE_PATTERN.sub('_', key)


def build_section_pattern(labels: List[str] = SECTION_LABELS) -> re.Pattern:
    """
    Build the alternation matching any section label followed by a colon.

    Whitespace inside a label matches any whitespace run, so labels wrapped
    across lines ("Default\\nValue:") are still found. The match includes the
    whitespace after the colon.
    """
    alternatives = '|'.join(
        r'\s+'.join(re.escape(word) for word in label.split())
        for label in labels
    )
    return re.compile(rf'((?:{alternatives}):\s+)')


SECTION_PATTERN = build_section_pattern()


__all__ = [
    'TITLE_ID_PATTERN',
    'BODY_TITLE_PATTERN',
    'SECTION_PATTERN',
    'normalize_whitespace',
    'split_title',
    'get_all_titles_content',
    'section_key_name',
    'build_section_pattern',
]
