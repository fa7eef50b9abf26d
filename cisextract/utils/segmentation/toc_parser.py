"""
Table of Contents (ToC) Parser for CIS Benchmark Text

Extracts the chapter and rule titles from the ToC part of the converted
document and crops them down to "<id> <name> [(status)]".

Key Functions:
- get_all_titles_toc: Extract raw ToC entries (one per chapter/rule)
- crop_title / crop_titles: Strip dot leaders, page numbers and line breaks
- get_toc_summary: Human-readable summary of classified titles
"""

import re
from typing import List

from cisextract.config import APPENDIX_MARKER
from cisextract.models import ClassifiedTitle
from cisextract.utils.logging_config import logger


# A ToC entry starts at a line beginning with a dotted numeric ID and ends
# with a page number directly followed by the next entry, a blank line or
# the end of the text. Entries may wrap over several lines:
#   "1.1.1 Ensure mounting of cramfs filesystems is disabled (Automated)\n.... 17"
TOC_TITLE_PATTERN = re.compile(
    r'(?<=\n)(\d+(?:\.\d+)*)\s[\s\S]*?\s?\d+(?=\n\d|\n\n|\n?\Z)'
)

# Trailing dot leader and page number. Not anchored right after a digit 1-9
# so the dots inside the rule ID are never taken for a leader.
TOC_LEADER_PATTERN = re.compile(r'(?<![1-9])\s?\.+\s?\d+$')

# Trailing page number without leader
TOC_PAGE_PATTERN = re.compile(r'^(.+?)(?:\s?\d+$)?$')


def get_all_titles_toc(toc: str) -> List[str]:
    """
    Extract all raw ToC entries.

    The last entry runs on into the appendix listing; it is cut at the
    first "Appendix:" and the partial line before the cut is dropped.

    Args:
        toc: Text between the first and second "Overview"

    Returns:
        Raw title strings in document order (may span several lines)

    Example:
        >>> get_all_titles_toc("\\n1 Initial Setup .... 8\\n1.1 Filesystem ..... 9\\n\\n")
        ['1 Initial Setup .... 8', '1.1 Filesystem ..... 9']
    """
    titles = [m.group(0) for m in TOC_TITLE_PATTERN.finditer(toc)]

    if not titles:
        logger.warning("No titles found in table of contents")
        return titles

    last = titles[-1]
    if APPENDIX_MARKER in last:
        last = last.split(APPENDIX_MARKER)[0]
        lines = last.replace('\r\n', '\n').split('\n')
        if len(lines) > 1:
            last = '\n'.join(lines[:-1])
        titles[-1] = last

    logger.debug(f"Extracted {len(titles)} raw titles from ToC")
    return titles


def crop_title(title: str) -> str:
    """
    Crop a raw ToC entry to its title.

    Example:
        >>> crop_title("1.1.1 Ensure cramfs is disabled\\n(Automated) ........ 17")
        '1.1.1 Ensure cramfs is disabled (Automated)'
    """
    title = TOC_LEADER_PATTERN.sub('', title)
    title = title.replace('\r\n', '\n').replace('\n', ' ')

    match = TOC_PAGE_PATTERN.match(title)
    if match:
        return match.group(1)
    return title


def crop_titles(titles: List[str]) -> List[str]:
    """Crop every raw ToC entry (see crop_title)."""
    return [crop_title(title) for title in titles]


def get_toc_summary(titles: List[ClassifiedTitle]) -> str:
    """
    Generate human-readable summary of classified ToC titles.

    Example:
        >>> print(get_toc_summary(titles))
        ToC Summary: 6 entries
          Chapters: 3
          Rules: 3 (2 automated)
    """
    if not titles:
        return "ToC Summary: No entries found"

    rules = [t for t in titles if t.is_rule]
    automated = [t for t in rules if t.automated]

    summary_lines = [
        f"ToC Summary: {len(titles)} entries",
        f"  Chapters: {len(titles) - len(rules)}",
        f"  Rules: {len(rules)} ({len(automated)} automated)",
    ]
    return "\n".join(summary_lines)


__all__ = [
    'TOC_TITLE_PATTERN',
    'get_all_titles_toc',
    'crop_title',
    'crop_titles',
    'get_toc_summary',
]
