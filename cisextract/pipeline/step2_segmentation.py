"""
STEP 2: SEGMENTATION

Locates every rule in the document body and fills its location and
content sections.

Process:
1. Extract rule headings from the body (they differ from the ToC titles)
2. Compare the heading count with the ToC rule count
3. For each rule: resolve its location, slice its span between its heading
   and the next rule's heading, split the span into named sections
4. Log identification errors (details on request)

Input: RuleCatalog (from Step 1), body text (from Step 0)
Output: SegmentationReport with populated rules

All identification failures are non-fatal; affected rules keep empty sections.
"""

from typing import List

from cisextract.models import BodyHeading, FormatOptions, Rule
from cisextract.utils.logging_config import log_step_start, logger
from cisextract.utils.segmentation import (
    RuleCatalog,
    SegmentationReport,
    get_all_titles_content,
    populate_rules,
)


def find_missing_headings(rules: List[Rule], headings: List[BodyHeading]) -> List[str]:
    """Return the IDs of rules with no matching body heading."""
    return [
        rule.id for rule in rules
        if not any(heading.belongs_to(rule.id) for heading in headings)
    ]


def log_heading_counts(rule_count: int, heading_count: int) -> None:
    """Tell the user how well body heading identification matched the ToC."""
    if heading_count == rule_count:
        logger.success(
            f"✓ Count of found text section headings is the same as in table of contents ({rule_count})"
        )
    elif heading_count > rule_count:
        logger.warning(
            f"⚠ Found more text section headings ({heading_count}, {heading_count - rule_count} more) "
            f"than in ToC - please verify rule contents after extraction"
        )
    else:
        logger.warning(
            f"⚠ Found less text section headings ({heading_count}, {rule_count - heading_count} less) "
            f"than in ToC - this will cause incomplete data"
        )


def log_errors(report: SegmentationReport, missing_headings: List[str], detailed: bool) -> None:
    """Log identification errors; missing headings and failed spans only in detailed mode."""
    logger.info(
        f"{len(report.span_errors)} section identification errors, "
        f"{len(report.rule_errors)} rule section identification errors"
    )

    if report.rule_errors:
        logger.warning("For the following rules no detail sections could be identified:")
        logger.warning(", ".join(report.rule_errors))

    if not detailed:
        return

    if missing_headings:
        logger.warning("No text section heading found for the following rules:")
        logger.warning(", ".join(missing_headings))

    if report.span_errors:
        logger.warning("For the following rules no content could be found between the rule titles:")
        for error in report.span_errors:
            logger.warning(f"  {error.describe()}")


def run(
    catalog: RuleCatalog,
    body: str,
    options: FormatOptions = FormatOptions(),
    detailed: bool = False,
) -> SegmentationReport:
    """
    Execute Step 2: Segmentation.

    Args:
        catalog: Rule catalog from Step 1
        body: Body text from Step 0
        options: Formatting switches for section content
        detailed: Log per-rule error details

    Returns:
        SegmentationReport
    """
    log_step_start("Step 2: Segmentation")

    headings = get_all_titles_content(body)
    log_heading_counts(catalog.rule_count, len(headings))
    missing_headings = find_missing_headings(catalog.rules, headings)

    logger.info("Extracting rule locations and content sections...")
    report = populate_rules(
        catalog.rules,
        headings,
        catalog.id_to_name,
        body,
        catalog.chapter_cleanup,
        options,
    )

    log_errors(report, missing_headings, detailed)

    populated = sum(1 for rule in report.rules if rule.sections)
    logger.success(f"✓ Populated {populated}/{len(report.rules)} rules with content sections")
    return report


__all__ = [
    "find_missing_headings",
    "log_heading_counts",
    "log_errors",
    "run",
]
