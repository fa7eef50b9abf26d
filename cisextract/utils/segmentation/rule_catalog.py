"""
Rule Catalog Builder

Turns the cropped ToC titles into the rule catalog: the ordered list of
rules, the ID→name map covering rules and chapters, and a cleanup pattern
that removes chapter headings leaking into rule content.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from cisextract.models import Rule
from cisextract.utils.logging_config import logger
from cisextract.utils.segmentation.heading_patterns import split_title


@dataclass
class RuleCatalog:
    """
    Result of prepare_rules().

    Attributes:
        chapter_count: Number of ToC entries that are chapters, not rules
        id_to_name: Dotted ID → name for every classified entry
        chapter_cleanup: Matches "<chapter id> <chapter name>" and everything
            after it; None when the ToC lists no chapters
        rules: Rules in document order, IDs unique
        title_errors: Titles that could not be split into ID and name
    """

    chapter_count: int = 0
    id_to_name: Dict[str, str] = field(default_factory=dict)
    chapter_cleanup: Optional[re.Pattern] = None
    rules: List[Rule] = field(default_factory=list)
    title_errors: List[str] = field(default_factory=list)

    @property
    def rule_count(self) -> int:
        return len(self.rules)


def build_chapter_cleanup(chapter_titles: List[str]) -> Optional[re.Pattern]:
    """
    Compile the chapter-cleanup pattern.

    Args:
        chapter_titles: "<id> <name>" strings of all chapters

    Returns:
        Pattern "(t1|t2|...)[\\s\\S]*", or None if there are no chapters
    """
    if not chapter_titles:
        return None

    alternatives = '|'.join(re.escape(title) for title in chapter_titles)
    return re.compile(rf'({alternatives})[\s\S]*')


def prepare_rules(titles: List[str]) -> RuleCatalog:
    """
    Classify the cropped ToC titles and build the rule catalog.

    Every classified title goes into the ID→name map. Rules become Rule
    records with empty location and sections; chapters are counted and
    added to the cleanup pattern. Unclassifiable titles are recorded and
    skipped; a rule ID seen twice keeps its first occurrence.

    Args:
        titles: Cropped titles in ToC order

    Returns:
        RuleCatalog
    """
    catalog = RuleCatalog()
    chapter_titles = []
    seen_rule_ids = set()

    for title in titles:
        classified = split_title(title)
        if classified is None:
            catalog.title_errors.append(title)
            continue

        if not classified.is_rule:
            catalog.id_to_name[classified.id] = classified.name
            catalog.chapter_count += 1
            chapter_titles.append(classified.text)
            continue

        if classified.id in seen_rule_ids:
            logger.warning(f"Duplicate rule ID {classified.id} in ToC, keeping first occurrence")
            continue

        seen_rule_ids.add(classified.id)
        catalog.id_to_name[classified.id] = classified.name
        catalog.rules.append(Rule(
            id=classified.id,
            name=classified.name,
            automated=classified.automated,
        ))

    catalog.chapter_cleanup = build_chapter_cleanup(chapter_titles)

    logger.debug(
        f"Prepared {catalog.rule_count} rules, {catalog.chapter_count} chapters, "
        f"{len(catalog.title_errors)} unclassified titles"
    )
    return catalog


__all__ = [
    'RuleCatalog',
    'build_chapter_cleanup',
    'prepare_rules',
]
