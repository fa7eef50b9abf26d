"""
Export Utilities (Step 3)

YAML and CSV renderings of the rule catalogue.
"""

from cisextract.utils.export.writers import (
    CSV_BASE_COLUMNS,
    EMPTY_CELL,
    csv_header,
    rule_to_row,
    render_yaml,
    write_yaml,
    write_csv,
    default_output_path,
)

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
