"""
Contract Validation Module

JSON Schema validation of the demonstration reports.
"""

from .validators import (
    FIZZBUZZ_REPORT,
    MAPPING_REPORT,
    SCHEMA_DIR,
    ReportContract,
    contract,
    load_schema,
    validate_fizzbuzz_report,
    validate_mapping_report,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "MAPPING_REPORT",
    "FIZZBUZZ_REPORT",
    # Classes
    "ReportContract",
    # Functions
    "load_schema",
    "contract",
    "validate_mapping_report",
    "validate_fizzbuzz_report",
]
