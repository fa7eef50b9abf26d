"""
Result File Writers

Renders the populated rules as YAML (hierarchical) or CSV (flat, fixed
columns) and writes them to disk.
"""

import csv
from pathlib import Path
from typing import List

import yaml

from cisextract.config import SECTION_LABELS
from cisextract.models import Rule
from cisextract.utils.logging_config import logger
from cisextract.utils.segmentation.heading_patterns import section_key_name


# Fixed leading CSV columns, followed by one column per section label
CSV_BASE_COLUMNS = ["ID", "Name", "Location", "Automated"]

# Rendered for sections that were not identified
EMPTY_CELL = " "


class _BlockStyleDumper(yaml.SafeDumper):
    """SafeDumper emitting multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str):
    if '\n' in data:
        return dumper.represent_scalar('tag:yaml.org,2002:str', data, style='|')
    return dumper.represent_scalar('tag:yaml.org,2002:str', data)


_BlockStyleDumper.add_representer(str, _represent_str)


def csv_header() -> List[str]:
    """Header row: ID, Name, Location, Automated + the nine section labels."""
    return CSV_BASE_COLUMNS + list(SECTION_LABELS)


def rule_to_row(rule: Rule) -> List[str]:
    """
    Render one rule as a CSV row.

    Example:
        >>> rule_to_row(Rule(id="1.1", name="Foo", automated=True))[:4]
        ['1.1', 'Foo', '', 'true']
    """
    row = [rule.id, rule.name, rule.location_string(), str(rule.automated).lower()]
    for label in SECTION_LABELS:
        row.append(rule.sections.get(section_key_name(label)) or EMPTY_CELL)
    return row


def render_yaml(rules: List[Rule]) -> str:
    """Render rules as a YAML document (list of ordered mappings)."""
    return yaml.dump(
        [rule.to_dict() for rule in rules],
        Dumper=_BlockStyleDumper,
        explicit_start=True,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=4096,
    )


def write_yaml(rules: List[Rule], output_path: Path) -> None:
    """Write rules to a YAML file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(render_yaml(rules))
    logger.info(f"YAML written to: {output_path}")


def write_csv(rules: List[Rule], output_path: Path) -> None:
    """Write rules to a CSV file with fixed columns."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(csv_header())
        for rule in rules:
            writer.writerow(rule_to_row(rule))
    logger.info(f"CSV written to: {output_path}")


def default_output_path(input_path: Path, use_csv: bool, suffix: str = "_extracted") -> Path:
    """
    Default output file: <input stem><suffix>.<csv|yaml> in the current directory.

    Example:
        >>> default_output_path(Path("/data/CIS_Ubuntu.pdf"), use_csv=False)
        PosixPath('CIS_Ubuntu_extracted.yaml')
    """
    extension = "csv" if use_csv else "yaml"
    return Path(f"{input_path.stem}{suffix}.{extension}")


__all__ = [
    'CSV_BASE_COLUMNS',
    'EMPTY_CELL',
    'csv_header',
    'rule_to_row',
    'render_yaml',
    'write_yaml',
    'write_csv',
    'default_output_path',
]
