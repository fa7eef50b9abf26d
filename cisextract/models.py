"""
Data Structures for Extracted Benchmark Rules

Defines the records shared between pipeline steps:
- Location: one ancestor chapter of a rule
- Rule: a checkable benchmark item with its content sections
- NamedSection: a labelled block of rule content (transient)
- BodyHeading: a rule heading found in the document body, with its offset
- FormatOptions: formatting switches passed down to the sanitizer
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Location:
    """An ancestor (chapter or parent rule) of a rule in the dotted-ID hierarchy."""

    id: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {'id': self.id, 'name': self.name}


@dataclass
class Rule:
    """
    A CIS Benchmark rule.

    Created by the rule catalog with empty location and sections, then
    populated in place during segmentation.

    Example:
        >>> rule = Rule(id="1.1.1", name="Ensure cramfs is disabled", automated=True)
        >>> rule.to_dict()
        {'id': '1.1.1', 'name': 'Ensure cramfs is disabled', 'automated': True}
    """

    id: str
    name: str
    automated: bool = False
    location: List[Location] = field(default_factory=list)
    sections: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate fields after initialization."""
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("id must be a non-empty string")

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the rule as an ordered mapping.

        Key order: id, name, automated, location (omitted if empty), then the
        section keys sorted alphabetically.
        """
        record: Dict[str, Any] = {
            'id': self.id,
            'name': self.name,
            'automated': self.automated,
        }
        if self.location:
            record['location'] = [loc.to_dict() for loc in self.location]
        for key in sorted(self.sections):
            record[key] = self.sections[key]
        return record

    def location_string(self) -> str:
        """Location as a comma-separated "id name" list (tabular output)."""
        return ", ".join(f"{loc.id} {loc.name}" for loc in self.location)


@dataclass
class NamedSection:
    """A labelled section of rule content, e.g. ("Audit:\\n", "Run ...")."""

    label: str
    content: str


@dataclass
class BodyHeading:
    """A rule heading found in the document body."""

    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    def belongs_to(self, rule_id: str) -> bool:
        return self.text.startswith(f"{rule_id} ")


@dataclass(frozen=True)
class FormatOptions:
    """
    Formatting switches for section content.

    Attributes:
        trim_breaks: Collapse all whitespace (including line breaks) to single spaces
    """

    trim_breaks: bool = False


@dataclass
class ClassifiedTitle:
    """Result of classifying a single ToC title."""

    id: str
    name: str
    is_rule: bool
    automated: bool

    @property
    def text(self) -> str:
        return f"{self.id} {self.name}"


def find_rule(rules: List[Rule], rule_id: str) -> Optional[Rule]:
    """Return the rule with the given ID, or None."""
    for rule in rules:
        if rule.id == rule_id:
            return rule
    return None
