"""
Unit Tests for cisextract.utils.segmentation.section_segmenter

Tests rule span location and named section extraction.
"""

import pytest
from cisextract.models import FormatOptions, Rule
from cisextract.pipeline.step1_catalog import build_catalog
from cisextract.utils.segmentation.heading_patterns import get_all_titles_content
from cisextract.utils.segmentation.section_segmenter import (
    build_sections,
    find_heading,
    find_named_values,
    find_rule_span,
    populate_rules,
)


# Rule 1.2 is listed in the ToC but has no heading in the body
GAP_BODY = (
    "\n\n1.1 Rule A (Manual)\n"
    "Description:\n"
    "A text\n"
    "\n"
    "1.3 Rule C (Manual)\n"
    "Description:\n"
    "C text\n"
    "Appendix: Summary"
)


@pytest.fixture
def populated_sample(sample_parts):
    """Sample document run through catalog and segmentation."""
    catalog = build_catalog(sample_parts.toc)
    headings = get_all_titles_content(sample_parts.body)
    report = populate_rules(
        catalog.rules,
        headings,
        catalog.id_to_name,
        sample_parts.body,
        catalog.chapter_cleanup,
    )
    return {rule.id: rule for rule in report.rules}, report


class TestFindNamedValues:
    """Tests for find_named_values()"""

    def test_two_sections(self):
        """Content runs up to the next label"""
        values = find_named_values("Audit:\nRun it\nRemediation:\nFix it")
        assert [v.label for v in values] == ["Audit:\n", "Remediation:\n"]
        assert [v.content for v in values] == ["Run it\n", "Fix it"]

    def test_text_before_first_label_ignored(self):
        """Text before the first label belongs to no section"""
        values = find_named_values("preamble\nDescription:\ntext")
        assert len(values) == 1
        assert values[0].content == "text"

    def test_no_labels(self):
        """Span without labels yields nothing"""
        assert find_named_values("Just some text") == []

    def test_wrapped_label(self):
        """Label split over two lines is found"""
        values = find_named_values("Default\nValue:\nNone")
        assert len(values) == 1
        assert values[0].content == "None"


class TestFindRuleSpan:
    """Tests for find_rule_span() and find_heading()"""

    def test_span_between_headings(self):
        """Span ends at the next rule's heading"""
        headings = get_all_titles_content(GAP_BODY)
        span, error = find_rule_span(GAP_BODY, headings, "1.1", "1.3")
        assert error is None
        assert span == "Description:\nA text\n\n"

    def test_fallback_to_next_heading(self):
        """Missing next heading: span ends at the following indexed heading"""
        headings = get_all_titles_content(GAP_BODY)
        span, error = find_rule_span(GAP_BODY, headings, "1.1", "1.2")
        assert error is None
        assert span == "Description:\nA text\n\n"

    def test_last_rule_ends_at_appendix(self):
        """Last rule runs up to "Appendix:" """
        headings = get_all_titles_content(GAP_BODY)
        span, error = find_rule_span(GAP_BODY, headings, "1.3", None)
        assert error is None
        assert span == "Description:\nC text\n"

    def test_missing_heading(self):
        """Rule without heading reports a span error"""
        headings = get_all_titles_content(GAP_BODY)
        span, error = find_rule_span(GAP_BODY, headings, "1.2", "1.3")
        assert span is None
        assert error.rule_id == "1.2"
        assert error.heading is None

    def test_missing_appendix(self):
        """Last rule without "Appendix:" reports its heading and terminator"""
        body = "\n\n1.1 Rule A (Manual)\nDescription:\nA\n"
        span, error = find_rule_span(body, get_all_titles_content(body), "1.1", None)
        assert span is None
        assert error.heading == "1.1 Rule A (Manual)"
        assert error.terminator == "Appendix:"
        assert "1.1" in error.describe()

    def test_find_heading_exact_id(self):
        """Heading of 1.1.10 does not belong to 1.1.1"""
        body = "\n\n1.1.10 Rule J (Manual)\nDescription:\nx\n"
        headings = get_all_titles_content(body)
        assert find_heading(headings, "1.1.1") is None
        assert find_heading(headings, "1.1.10") is headings[0]


class TestBuildSections:
    """Tests for build_sections()"""

    def test_duplicate_label_last_wins(self):
        """A label appearing twice keeps the later content"""
        values = find_named_values("Description:\nfirst\nDescription:\nsecond")
        assert build_sections(values) == {"description": "second"}

    def test_trim_breaks(self):
        """trim_breaks collapses line breaks"""
        values = find_named_values("Audit:\nline one\nline two\n")
        sections = build_sections(values, None, FormatOptions(trim_breaks=True))
        assert sections == {"audit": "line one line two"}


class TestPopulateRules:
    """Tests for populate_rules()"""

    def test_sample_sections(self, populated_sample):
        """Sections of the first sample rule"""
        rules, _ = populated_sample
        assert rules["1.1.1"].sections == {
            "profile_applicability": "Level 1 - Server",
            "description": "The cramfs filesystem type is a compressed read-only Linux filesystem.",
            "rationale": "Removing support for unneeded filesystem types reduces the local attack surface.",
            "audit": "Run the following command:\n# modprobe -n -v cramfs",
            "remediation": "Edit or create a file in the /etc/modprobe.d/ directory.",
            "cis_controls": "Version 7\n5.1 Establish Secure Configurations",
        }

    def test_chapter_heading_removed_from_content(self, populated_sample):
        """Chapter heading leaking into the last section is cut"""
        rules, _ = populated_sample
        assert rules["1.1.2"].sections["default_value"] == "None"

    def test_last_rule(self, populated_sample):
        """Last rule stops at the appendix"""
        rules, _ = populated_sample
        assert rules["2.1"].sections == {
            "description": "System time should be synchronized between all systems.",
            "references": "1. NIST SP 800-53 Rev. 4 AU-8",
        }

    def test_locations(self, populated_sample):
        """Locations come from the ToC hierarchy"""
        rules, _ = populated_sample
        assert rules["1.1.1"].location_string() == "1 Initial Setup, 1.1 Filesystem Configuration"
        assert rules["2.1"].location_string() == "2 Services"

    def test_no_errors(self, populated_sample):
        """Sample document has no identification errors"""
        _, report = populated_sample
        assert report.span_errors == []
        assert report.rule_errors == []

    def test_gap_in_body(self):
        """Rule without heading keeps empty sections, others are filled"""
        rules = [Rule(id="1.1", name="Rule A"), Rule(id="1.2", name="Rule B"), Rule(id="1.3", name="Rule C")]
        report = populate_rules(rules, get_all_titles_content(GAP_BODY), {"1": "Chapter"}, GAP_BODY)
        assert rules[0].sections == {"description": "A text"}
        assert rules[1].sections == {}
        assert rules[2].sections == {"description": "C text"}
        assert [e.rule_id for e in report.span_errors] == ["1.2"]
        assert all(rule.location_string() == "1 Chapter" for rule in rules)

    def test_rule_without_labels(self):
        """Span without labels is a rule error"""
        body = "\n\n1.1 Rule A (Manual)\nJust some text\nAppendix: x"
        rules = [Rule(id="1.1", name="Rule A")]
        report = populate_rules(rules, get_all_titles_content(body), {}, body)
        assert report.rule_errors == ["1.1"]
        assert rules[0].sections == {}
