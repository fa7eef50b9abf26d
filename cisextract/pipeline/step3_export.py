"""
STEP 3: EXPORT

Writes the populated rules to a YAML or CSV result file.

Input: Populated rules (from Step 2)
Output: Result file at the given path
"""

from pathlib import Path
from typing import List

from cisextract.models import Rule
from cisextract.utils.export import write_csv, write_yaml
from cisextract.utils.logging_config import log_step_start, logger


class ExportError(Exception):
    """Raised when the result file cannot be written."""
    pass


def run(rules: List[Rule], output_path: Path, use_csv: bool = False) -> Path:
    """
    Execute Step 3: Export.

    Args:
        rules: Populated rules
        output_path: Destination file
        use_csv: Write CSV instead of YAML

    Returns:
        Path of the written file

    Raises:
        ExportError: If the file cannot be written
    """
    log_step_start("Step 3: Export")

    logger.info("Writing result file...")
    try:
        if use_csv:
            write_csv(rules, output_path)
        else:
            write_yaml(rules, output_path)
    except OSError as e:
        logger.error(f"❌ Failed to write {output_path}: {e}")
        raise ExportError(f"Failed to write {output_path}: {e}") from e

    logger.success(f"✓ Wrote {len(rules)} rules")
    return output_path


__all__ = [
    "ExportError",
    "run",
]
