#!/usr/bin/env python3
"""
Benchmark document inspection script.

Quick utility to check how well a benchmark document is recognized before
running a full extraction: ToC classification, body heading matches and,
optionally, the extracted sections of a single rule.

Usage:
    python scripts/inspect_document.py <benchmark.pdf|benchmark.txt> [--rule 1.1.1]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for proper module resolution
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cisextract.models import find_rule
from cisextract.pipeline.step0_conversion import run as run_step0
from cisextract.utils.logging_config import setup_logger, logger
from cisextract.utils.segmentation import (
    crop_titles,
    get_all_titles_content,
    get_all_titles_toc,
    get_toc_summary,
    populate_rules,
    prepare_rules,
    split_title,
)


def inspect_document(input_path: Path, rule_id: str = None):
    """
    Inspect a benchmark document and print a summary.

    Args:
        input_path: Benchmark PDF or pre-converted text file
        rule_id: Optional rule to print in full
    """
    parts = run_step0(input_path)

    titles = crop_titles(get_all_titles_toc(parts.toc))
    classified = [c for c in (split_title(t) for t in titles) if c is not None]

    logger.info("=" * 80)
    logger.info("BENCHMARK DOCUMENT INSPECTION")
    logger.info("=" * 80)
    logger.info(f"Document: {input_path}")
    logger.info("")
    for line in get_toc_summary(classified).splitlines():
        logger.info(line)
    logger.info("")

    catalog = prepare_rules(titles)
    headings = get_all_titles_content(parts.body)

    logger.info("TOC ENTRIES:")
    for entry in classified:
        indent = "  " * entry.id.count('.')
        kind = "rule" if entry.is_rule else "chapter"
        found = any(h.belongs_to(entry.id) for h in headings) if entry.is_rule else None
        marker = "" if found is None else ("  [heading found]" if found else "  [NO HEADING]")
        logger.info(f"  {indent}{entry.id} {entry.name} ({kind}){marker}")
    logger.info("")

    if rule_id is None:
        return

    report = populate_rules(catalog.rules, headings, catalog.id_to_name, parts.body, catalog.chapter_cleanup)
    rule = find_rule(report.rules, rule_id)
    if rule is None:
        logger.error(f"Rule {rule_id} not found in ToC")
        return

    logger.info(f"RULE {rule.id}: {rule.name}")
    logger.info(f"  Automated: {rule.automated}")
    logger.info(f"  Location: {rule.location_string() or '-'}")
    if not rule.sections:
        logger.warning("  (No sections identified)")
    for key, value in rule.sections.items():
        logger.info(f"  [{key}]")
        for line in value.splitlines():
            logger.info(f"    {line}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Inspect a CIS Benchmark document")
    parser.add_argument("input", type=Path, help="Benchmark PDF or pre-converted .txt")
    parser.add_argument("--rule", help="Print the extracted sections of this rule")
    args = parser.parse_args()

    setup_logger(log_to_file=False)
    inspect_document(args.input, args.rule)
