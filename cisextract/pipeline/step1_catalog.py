"""
STEP 1: RULE CATALOG

Builds the rule catalog from the table of contents.

Process:
1. Extract raw titles from the ToC
2. Crop dot leaders, page numbers and line breaks
3. Classify each title as rule or chapter and build the catalog
4. Log counts (rules, chapters, unclassified titles)

Input: ToC text (from Step 0)
Output: RuleCatalog
"""

from typing import List

from cisextract.utils.logging_config import log_step_start, logger
from cisextract.utils.segmentation import (
    RuleCatalog,
    crop_titles,
    get_all_titles_toc,
    prepare_rules,
)


class CatalogError(Exception):
    """Raised when no rule can be found in the table of contents."""
    pass


def build_catalog(toc: str) -> RuleCatalog:
    """Extract, crop and classify the ToC titles."""
    titles: List[str] = crop_titles(get_all_titles_toc(toc))
    return prepare_rules(titles)


def run(toc: str) -> RuleCatalog:
    """
    Execute Step 1: Rule Catalog.

    Args:
        toc: Text of the table of contents

    Returns:
        RuleCatalog

    Raises:
        CatalogError: If the ToC yields no rules
    """
    log_step_start("Step 1: Rule Catalog")

    catalog = build_catalog(toc)

    for title in catalog.title_errors:
        logger.warning(f"⚠ Skipped ToC entry without ID: {title!r}")

    if catalog.rule_count == 0:
        logger.error("❌ No rules found in table of contents")
        raise CatalogError("No rules found in table of contents")

    logger.success(
        f"✓ Found {catalog.rule_count} rules (and {catalog.chapter_count} additional parent "
        f"chapters, total {catalog.rule_count + catalog.chapter_count}) in ToC"
    )
    return catalog


__all__ = [
    "CatalogError",
    "build_catalog",
    "run",
]
