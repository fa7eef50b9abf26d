"""
Utilities Module for the CIS Benchmark Rule Extractor

Organized by concern:
- logging_config.py: Shared logging utilities
- segmentation/: ToC parsing, heading patterns, rule catalog, section segmentation
- cleanup/: Text normalization
- export/: YAML and CSV writers
"""

# Re-export logging utilities at top level
from cisextract.utils.logging_config import setup_logger, get_logger, logger

__all__ = [
    "setup_logger",
    "get_logger",
    "logger",
]
