"""
Configuration Module for the CIS Benchmark Rule Extractor

Loads configuration from environment variables (.env file) and validates
the settings on import. Includes converter selection, logging settings and
the fixed text conventions of CIS Benchmark documents.
"""

import os
import sys
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Note: Logger will be configured by setup_logger() in logging_config
# Import is deferred to avoid circular dependency during config loading


# Load environment variables from .env file
# Look for .env in the project root (parent of cisextract/)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    # Try loading from current directory as fallback
    load_dotenv()


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def get_env_variable(var_name: str, required: bool = True, default: Optional[str] = None) -> str:
    """
    Get environment variable with validation.

    Args:
        var_name: Name of environment variable
        required: Whether this variable is required
        default: Default value if not required and not found

    Returns:
        Value of environment variable

    Raises:
        ConfigurationError: If required variable is missing
    """
    value = os.getenv(var_name)

    if value is None or value.strip() == "":
        if required:
            raise ConfigurationError(
                f"Required environment variable '{var_name}' is not set. "
                f"Please add it to your .env file."
            )
        return default

    return value.strip()


def get_env_bool(var_name: str, default: bool) -> bool:
    """
    Read a boolean flag from the environment.

    Accepts 1/true/yes/on and 0/false/no/off (case-insensitive).

    Raises:
        ConfigurationError: If the value is not a recognised boolean
    """
    value = get_env_variable(var_name, required=False)
    if value is None:
        return default

    lowered = value.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False

    raise ConfigurationError(f"'{var_name}' must be a boolean, got '{value}'")


# ==================================
# PDF Conversion
# ==================================

# Supported converters: poppler's pdftotext (default) or IBM Docling
SUPPORTED_CONVERTERS = ("pdftotext", "docling")
PDF_CONVERTER = get_env_variable("PDF_CONVERTER", required=False, default="pdftotext").lower()

# pdftotext executable (must be on $PATH unless an absolute path is given)
PDFTOTEXT_BINARY = get_env_variable("PDFTOTEXT_BINARY", required=False, default="pdftotext")
PDFTOTEXT_TIMEOUT = int(get_env_variable("PDFTOTEXT_TIMEOUT", required=False, default="300"))

# Docling version tracking for reproducibility
DOCLING_VERSION = "2.0.0"  # Update this when upgrading Docling


# ==================================
# Document Conventions
# ==================================

# The word "Overview" introduces the ToC and, a second time, the body
TOC_MARKER = "Overview"

# Text that follows the last rule of the body
APPENDIX_MARKER = "Appendix:"

# Section labels in output order (CSV columns follow this order)
SECTION_LABELS = [
    "Profile Applicability",
    "Description",
    "Rationale",
    "Audit",
    "Remediation",
    "Impact",
    "Default Value",
    "References",
    "CIS Controls",
]

# Rule status suffixes; the first two mark a rule as automated
RULE_STATUS_SUFFIXES = ["(Automated)", "(Scored)", "(Manual)", "(Not Scored)"]
AUTOMATED_STATUS_SUFFIXES = RULE_STATUS_SUFFIXES[:2]


# ==================================
# Output
# ==================================

# Default output name: <pdf stem><OUTPUT_SUFFIX>.<yaml|csv>
OUTPUT_SUFFIX = get_env_variable("OUTPUT_SUFFIX", required=False, default="_extracted")


# ==================================
# File Paths
# ==================================

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Logging directory
LOGS_DIR = Path(get_env_variable("LOGS_DIR", required=False, default=str(PROJECT_ROOT / "logs")))


# ==================================
# Logging Configuration
# ==================================

# Log level (used by logging_config.py)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Write rotating log files to LOGS_DIR in addition to the console
LOG_TO_FILE = get_env_bool("LOG_TO_FILE", default=True)

# Note: Log format, rotation, and retention are configured in cisextract/utils/logging_config.py


# ==================================
# Validation on Import
# ==================================

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def validate_configuration():
    """
    Validate configuration on module import.

    Checks:
    - Converter name is supported
    - Log level is known to loguru
    - Timeouts are positive
    - Logs directory exists or can be created (only when file logging is on)

    Raises:
        ConfigurationError: If configuration is invalid
    """
    errors = []

    if PDF_CONVERTER not in SUPPORTED_CONVERTERS:
        errors.append(
            f"PDF_CONVERTER must be one of {', '.join(SUPPORTED_CONVERTERS)}, got '{PDF_CONVERTER}'"
        )

    if LOG_LEVEL not in VALID_LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got '{LOG_LEVEL}'")

    if PDFTOTEXT_TIMEOUT <= 0:
        errors.append(f"PDFTOTEXT_TIMEOUT must be positive, got {PDFTOTEXT_TIMEOUT}")

    if LOG_TO_FILE:
        try:
            LOGS_DIR.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            errors.append(f"Cannot create directory {LOGS_DIR}: {e}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
        raise ConfigurationError(error_msg)


# Run validation on import
try:
    validate_configuration()
except ConfigurationError as e:
    # Note: Using print() here because this runs during module import,
    # before logging is configured. Logging setup depends on config being loaded first.
    print(f"\n❌ {e}", file=sys.stderr)
    sys.exit(1)


# ==================================
# Helper Functions
# ==================================

def print_configuration():
    """Print current configuration (for debugging)."""
    print("\n" + "=" * 80)
    print("CIS Benchmark Rule Extractor Configuration")
    print("=" * 80)
    print(f"\nConversion:")
    print(f"  Converter: {PDF_CONVERTER}")
    print(f"  pdftotext binary: {PDFTOTEXT_BINARY} (timeout {PDFTOTEXT_TIMEOUT}s)")
    print(f"  Docling Version: {DOCLING_VERSION}")
    print(f"\nDocument Conventions:")
    print(f"  ToC marker: {TOC_MARKER!r}")
    print(f"  Appendix marker: {APPENDIX_MARKER!r}")
    print(f"  Section labels: {', '.join(SECTION_LABELS)}")
    print(f"\nOutput:")
    print(f"  Default file suffix: {OUTPUT_SUFFIX}")
    print(f"\nLogging:")
    print(f"  Level: {LOG_LEVEL}")
    print(f"  File logging: {'enabled' if LOG_TO_FILE else 'disabled'} ({LOGS_DIR})")
    print("=" * 80 + "\n")


# Export all configuration variables
__all__ = [
    "ConfigurationError",
    "get_env_variable",
    "get_env_bool",
    # Conversion
    "SUPPORTED_CONVERTERS",
    "PDF_CONVERTER",
    "PDFTOTEXT_BINARY",
    "PDFTOTEXT_TIMEOUT",
    "DOCLING_VERSION",
    # Document conventions
    "TOC_MARKER",
    "APPENDIX_MARKER",
    "SECTION_LABELS",
    "RULE_STATUS_SUFFIXES",
    "AUTOMATED_STATUS_SUFFIXES",
    # Output
    "OUTPUT_SUFFIX",
    # Paths
    "PROJECT_ROOT",
    "LOGS_DIR",
    # Logging
    "LOG_LEVEL",
    "LOG_TO_FILE",
    # Helper functions
    "print_configuration",
]
