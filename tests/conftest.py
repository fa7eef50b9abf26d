"""
Pytest configuration and shared fixtures for the CIS Benchmark Rule Extractor tests.

Provides a small synthetic benchmark document laid out the way pdftotext
renders CIS Benchmarks (ToC introduced by "Overview", body introduced by a
second "Overview", rules followed by "Appendix:").
"""

import os

# Keep test runs from writing log files into the project
os.environ.setdefault("LOG_TO_FILE", "false")

from pathlib import Path

import pytest


SAMPLE_DOCUMENT = (
    "CIS Example Linux Benchmark\n"
    "v1.0.0 - 01-01-2024\n"
    "\n"
    "Table of Contents\n"
    "Overview .............................................................. 4\n"
    "1 Initial Setup ....................................................... 6\n"
    "1.1 Filesystem Configuration .......................................... 7\n"
    "1.1.1 Ensure mounting of cramfs filesystems is disabled\n"
    "(Automated) ........................................................... 8\n"
    "1.1.2 Ensure /tmp is configured (Manual) ............................ 10\n"
    "2 Services ........................................................... 12\n"
    "2.1 Ensure time synchronization is in use (Scored) ................... 13\n"
    "Appendix: Summary Table ............................................. 15\n"
    "Appendix: Change History ............................................ 16\n"
    "\n"
    "1 | Page\n"
    "\n"
    "Overview\n"
    "All CIS Benchmarks focus on technical configuration settings.\n"
    "\n"
    "1 Initial Setup\n"
    "Items in this section are advised for all systems.\n"
    "\n"
    "1.1 Filesystem Configuration\n"
    "\n"
    "1.1.1 Ensure mounting of cramfs filesystems is disabled\n"
    "(Automated)\n"
    "Profile Applicability:\n"
    "• Level 1 - Server\n"
    "Description:\n"
    "The cramfs filesystem type is a compressed read-only Linux filesystem.\n"
    "Rationale:\n"
    "Removing support for unneeded filesystem types reduces the local attack surface.\n"
    "Audit:\n"
    "Run the following command:\n"
    "# modprobe -n -v cramfs\n"
    "\n"
    "\n"
    "\n"
    "2 | P a g e\n"
    "Remediation:\n"
    "Edit or create a file in the /etc/modprobe.d/ directory.\n"
    "CIS Controls:\n"
    "Version 7\n"
    "5.1 Establish Secure Configurations\n"
    "\n"
    "1.1.2 Ensure /tmp is configured (Manual)\n"
    "Profile Applicability:\n"
    "• Level 1 - Workstation\n"
    "Description:\n"
    "The /tmp directory is a world-writable directory.\n"
    "Default Value:\n"
    "None\n"
    "\n"
    "2 Services\n"
    "This section describes services that are installed on systems.\n"
    "\n"
    "2.1 Ensure time synchronization is in use (Scored)\n"
    "Description:\n"
    "System time should be synchronized between all systems.\n"
    "References:\n"
    "1. NIST SP 800-53 Rev. 4 AU-8\n"
    "\n"
    "Appendix: Summary Table\n"
    "Control Set Correctly\n"
)


@pytest.fixture
def sample_document() -> str:
    """Full converted text of the synthetic benchmark."""
    return SAMPLE_DOCUMENT


@pytest.fixture
def sample_parts():
    """ToC and body of the synthetic benchmark (page markers removed)."""
    from cisextract.pipeline.step0_conversion import split_document
    from cisextract.utils.cleanup import cut_page_markers

    return split_document(cut_page_markers(SAMPLE_DOCUMENT))


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory for result files."""
    path = tmp_path / "output"
    path.mkdir()
    return path


@pytest.fixture
def sample_text_file(tmp_path: Path) -> Path:
    """The synthetic benchmark written to a .txt file."""
    path = tmp_path / "CIS_Example_Benchmark.txt"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path
