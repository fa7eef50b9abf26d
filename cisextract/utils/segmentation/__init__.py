"""
Segmentation Utilities (Steps 1-2)

Utilities for ToC parsing, rule catalog construction, heading detection,
location resolution and section segmentation.
"""

from cisextract.utils.segmentation.heading_patterns import (
    TITLE_ID_PATTERN,
    BODY_TITLE_PATTERN,
    SECTION_PATTERN,
    normalize_whitespace,
    split_title,
    get_all_titles_content,
    section_key_name,
    build_section_pattern,
)

from cisextract.utils.segmentation.toc_parser import (
    TOC_TITLE_PATTERN,
    get_all_titles_toc,
    crop_title,
    crop_titles,
    get_toc_summary,
)

from cisextract.utils.segmentation.rule_catalog import (
    RuleCatalog,
    build_chapter_cleanup,
    prepare_rules,
)

from cisextract.utils.segmentation.hierarchy_builder import (
    get_parent_ids,
    get_rule_location,
)

from cisextract.utils.segmentation.section_segmenter import (
    SpanError,
    SegmentationReport,
    find_named_values,
    find_heading,
    find_rule_span,
    build_sections,
    populate_rules,
)

__all__ = [
    # heading_patterns
    'TITLE_ID_PATTERN',
    'BODY_TITLE_PATTERN',
    'SECTION_PATTERN',
    'normalize_whitespace',
    'split_title',
    'get_all_titles_content',
    'section_key_name',
    'build_section_pattern',
    # toc_parser
    'TOC_TITLE_PATTERN',
    'get_all_titles_toc',
    'crop_title',
    'crop_titles',
    'get_toc_summary',
    # rule_catalog
    'RuleCatalog',
    'build_chapter_cleanup',
    'prepare_rules',
    # hierarchy_builder
    'get_parent_ids',
    'get_rule_location',
    # section_segmenter
    'SpanError',
    'SegmentationReport',
    'find_named_values',
    'find_heading',
    'find_rule_span',
    'build_sections',
    'populate_rules',
]
