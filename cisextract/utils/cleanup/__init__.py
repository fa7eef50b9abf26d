"""
Cleanup Utilities

Text normalization for the converted document and for rule section content.
"""

from cisextract.utils.cleanup.text_normalizer import (
    PAGE_MARKER_PATTERN,
    cut_page_markers,
    remove_non_text,
    reduce_linebreaks,
    collapse_whitespace,
    sanitize_section_content,
)


__all__ = [
    'PAGE_MARKER_PATTERN',
    'cut_page_markers',
    'remove_non_text',
    'reduce_linebreaks',
    'collapse_whitespace',
    'sanitize_section_content',
]
