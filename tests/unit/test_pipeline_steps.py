"""
Unit Tests for the pipeline step modules

Tests the ToC/body split, catalog checks, heading comparison and export
error handling of Steps 0-3.
"""

import pytest
from cisextract.models import Rule
from cisextract.parsers import ConversionError
from cisextract.pipeline import step0_conversion, step1_catalog, step2_segmentation, step3_export
from cisextract.pipeline.step0_conversion import DocumentStructureError, split_document
from cisextract.utils.logging_config import logger
from cisextract.utils.segmentation import SegmentationReport, get_all_titles_content


class TestSplitDocument:
    """Tests for split_document()"""

    def test_split(self):
        parts = split_document("Title\nOverview\n1 Setup .. 5\nOverview\nBody")
        assert parts.toc == "\n1 Setup .. 5\n"
        assert parts.body == "\nBody"

    def test_body_keeps_later_markers(self):
        """Only the first two markers split the document"""
        parts = split_document("a Overview b Overview c Overview d")
        assert parts.body == " c Overview d"

    @pytest.mark.parametrize("text", ["no marker at all", "only one Overview here"])
    def test_too_few_markers(self, text):
        with pytest.raises(DocumentStructureError):
            split_document(text)


class TestStep0:
    """Tests for step0_conversion.run()"""

    def test_text_input(self, sample_text_file):
        """Page markers are removed before the split"""
        parts = step0_conversion.run(sample_text_file)
        assert "| Page" not in parts.toc
        assert "P a g e" not in parts.body
        assert parts.body.startswith("\nAll CIS Benchmarks")

    def test_missing_input(self, tmp_path):
        with pytest.raises(ConversionError):
            step0_conversion.run(tmp_path / "missing.txt")


class TestStep1:
    """Tests for step1_catalog.run()"""

    def test_sample(self, sample_parts):
        catalog = step1_catalog.run(sample_parts.toc)
        assert catalog.rule_count == 3
        assert catalog.chapter_count == 3

    def test_no_rules(self):
        """A ToC with chapters only is rejected"""
        with pytest.raises(step1_catalog.CatalogError):
            step1_catalog.run("\n1 Initial Setup .... 5\n2 Services .... 9\n\n")


class TestStep2:
    """Tests for step2_segmentation"""

    def test_find_missing_headings(self):
        body = "\n\n1.1 Rule A (Manual)\nDescription:\nx\n"
        rules = [Rule(id="1.1", name="Rule A"), Rule(id="1.2", name="Rule B")]
        assert step2_segmentation.find_missing_headings(rules, get_all_titles_content(body)) == ["1.2"]

    def test_rule_errors_listed_without_details(self):
        """IDs of rules without sections are logged even outside detailed mode"""
        messages = []
        sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="INFO")
        try:
            report = SegmentationReport(rules=[], rule_errors=["1.1", "2.3"])
            step2_segmentation.log_errors(report, ["4.4"], detailed=False)
        finally:
            logger.remove(sink_id)

        assert "1.1, 2.3" in messages
        assert not any("4.4" in m for m in messages)

    def test_missing_headings_listed_in_details(self):
        messages = []
        sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="INFO")
        try:
            step2_segmentation.log_errors(SegmentationReport(rules=[]), ["4.4"], detailed=True)
        finally:
            logger.remove(sink_id)

        assert "4.4" in messages

    def test_run_sample(self, sample_parts):
        catalog = step1_catalog.run(sample_parts.toc)
        report = step2_segmentation.run(catalog, sample_parts.body, detailed=True)
        assert all(rule.sections for rule in report.rules)


class TestStep3:
    """Tests for step3_export.run()"""

    def test_yaml_default(self, tmp_path):
        path = step3_export.run([Rule(id="1.1", name="a")], tmp_path / "out.yaml")
        assert path.read_text(encoding="utf-8").startswith("---")

    def test_csv(self, tmp_path):
        path = step3_export.run([Rule(id="1.1", name="a")], tmp_path / "out.csv", use_csv=True)
        assert path.read_text(encoding="utf-8").startswith("ID,Name,Location,Automated")

    def test_unwritable_destination(self, tmp_path):
        """Output below a regular file cannot be created"""
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        with pytest.raises(step3_export.ExportError):
            step3_export.run([Rule(id="1.1", name="a")], blocker / "out.yaml")
