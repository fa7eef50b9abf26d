"""
Section Segmenter

Locates the body text belonging to each rule and splits it into the named
content sections (Description, Rationale, Audit, ...).

A rule's span runs from the line after its body heading up to the heading
of the next rule (or "Appendix:" after the last rule). Spans are sliced by
offset from the heading index built by get_all_titles_content().

Key Functions:
- find_named_values: Split a span into labelled sections
- find_rule_span: Locate the span of one rule
- populate_rules: Fill location and sections of every rule
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from cisextract.config import APPENDIX_MARKER
from cisextract.models import BodyHeading, FormatOptions, NamedSection, Rule
from cisextract.utils.cleanup.text_normalizer import sanitize_section_content
from cisextract.utils.logging_config import logger
from cisextract.utils.segmentation.heading_patterns import (
    SECTION_PATTERN,
    section_key_name,
)
from cisextract.utils.segmentation.hierarchy_builder import get_rule_location


@dataclass
class SpanError:
    """A rule whose body text could not be located."""

    rule_id: str
    heading: Optional[str]
    terminator: Optional[str]

    def describe(self) -> str:
        heading = repr(self.heading) if self.heading else "<no heading>"
        terminator = repr(self.terminator) if self.terminator else "<no terminator>"
        return f"{self.rule_id}: {heading} -> {terminator}"


@dataclass
class SegmentationReport:
    """
    Outcome of populate_rules().

    Attributes:
        rules: The populated rules (same objects as passed in)
        rule_errors: IDs of rules whose span contained no section label
        span_errors: Rules whose span could not be located
    """

    rules: List[Rule]
    rule_errors: List[str] = field(default_factory=list)
    span_errors: List[SpanError] = field(default_factory=list)


def find_named_values(span: str, pattern: re.Pattern = SECTION_PATTERN) -> List[NamedSection]:
    """
    Split a span into labelled sections.

    Each label's content is the text between the end of its match and the
    start of the next match, or the end of the span for the last one.

    Args:
        span: Body text of one rule
        pattern: Section label pattern

    Returns:
        Sections in the order they appear

    Example:
        >>> find_named_values("Audit:\\nRun it\\nRemediation:\\nFix it")
        [NamedSection(label='Audit:\\n', content='Run it\\n'), NamedSection(label='Remediation:\\n', content='Fix it')]
    """
    hits = list(pattern.finditer(span))
    sections = []

    for i, hit in enumerate(hits):
        end = hits[i + 1].start() if i + 1 < len(hits) else len(span)
        sections.append(NamedSection(label=hit.group(0), content=span[hit.end():end]))

    return sections


def find_heading(headings: List[BodyHeading], rule_id: str) -> Optional[BodyHeading]:
    """Return the body heading of a rule (the last one if several match)."""
    found = None
    for heading in headings:
        if heading.belongs_to(rule_id):
            found = heading
    return found


def find_rule_span(
    content: str,
    headings: List[BodyHeading],
    rule_id: str,
    next_rule_id: Optional[str],
) -> tuple[Optional[str], Optional[SpanError]]:
    """
    Locate the body text of one rule.

    The span starts after the line break ending the rule's heading. It ends
    at the heading of the next rule; if that heading is missing, at the next
    heading found after this one. The last rule ends at "Appendix:".

    Args:
        content: Body text of the document
        headings: Heading index from get_all_titles_content()
        rule_id: ID of the rule
        next_rule_id: ID of the following rule, or None for the last rule

    Returns:
        Tuple of (span, None) on success or (None, SpanError)
    """
    heading = find_heading(headings, rule_id)
    if heading is None:
        return None, SpanError(rule_id, None, None)

    span_start = heading.end + 1

    if next_rule_id is None:
        terminator_text = APPENDIX_MARKER
        span_end = content.find(APPENDIX_MARKER, span_start)
    else:
        terminator = find_heading(headings, next_rule_id)
        if terminator is None or terminator.start < span_start:
            terminator = next((h for h in headings if h.start >= span_start), None)
        terminator_text = terminator.text if terminator else None
        span_end = terminator.start if terminator else -1

    if span_end < span_start:
        return None, SpanError(rule_id, heading.text, terminator_text)

    return content[span_start:span_end], None


def build_sections(
    named_values: List[NamedSection],
    chapter_cleanup: Optional[re.Pattern] = None,
    options: FormatOptions = FormatOptions(),
) -> Dict[str, str]:
    """Sanitize section contents and key them by normalized label (last one wins)."""
    sections = {}
    for value in named_values:
        sections[section_key_name(value.label)] = sanitize_section_content(
            value.content, chapter_cleanup, options
        )
    return sections


def populate_rules(
    rules: List[Rule],
    headings: List[BodyHeading],
    id_to_name: Dict[str, str],
    content: str,
    chapter_cleanup: Optional[re.Pattern] = None,
    options: FormatOptions = FormatOptions(),
) -> SegmentationReport:
    """
    Fill the location and content sections of every rule, in place.

    Failures are non-fatal: a rule whose span cannot be located is recorded
    in span_errors, a rule whose span has no section label in rule_errors.
    Both keep empty sections and stay in the catalogue.

    Args:
        rules: Rules in document order (from prepare_rules)
        headings: Heading index from get_all_titles_content()
        id_to_name: Dotted ID → name for all ToC entries
        content: Body text of the document
        chapter_cleanup: Pattern removing leaked chapter headings, or None
        options: Formatting switches for section content

    Returns:
        SegmentationReport
    """
    report = SegmentationReport(rules=rules)

    for i, rule in enumerate(rules):
        rule.location = get_rule_location(id_to_name, rule.id)

        next_rule_id = rules[i + 1].id if i + 1 < len(rules) else None
        span, error = find_rule_span(content, headings, rule.id, next_rule_id)
        if error is not None:
            logger.debug(f"No span found for rule {error.describe()}")
            report.span_errors.append(error)
            continue

        named_values = find_named_values(span)
        if not named_values:
            logger.debug(f"No sections identified for rule {rule.id}")
            report.rule_errors.append(rule.id)
            continue

        rule.sections = build_sections(named_values, chapter_cleanup, options)

    return report


__all__ = [
    'SpanError',
    'SegmentationReport',
    'find_named_values',
    'find_heading',
    'find_rule_span',
    'build_sections',
    'populate_rules',
]
