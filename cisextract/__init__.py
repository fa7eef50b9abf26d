"""
CIS Benchmark Rule Extractor

Converts CIS Benchmark PDF documents into a structured catalogue of rules
(ID, name, location, automated flag and content sections), rendered as YAML
or CSV.
"""

__version__ = "0.1.0"
