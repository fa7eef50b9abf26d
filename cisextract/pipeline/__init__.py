"""
Pipeline Module for the CIS Benchmark Rule Extractor

Contains the four pipeline steps (Step 0-3) for converting a CIS Benchmark
document into a rule catalogue:
- step0_conversion: document → ToC text + body text
- step1_catalog: ToC → rule catalog
- step2_segmentation: body → rule locations and sections
- step3_export: rules → YAML / CSV file
"""

__all__ = []
