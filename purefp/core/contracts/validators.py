"""
JSON Schema contracts for the demonstration reports (jsonschema, Draft 2020-12)

Schemas in purefp/core/contracts/schema/:
- mapping_report.json
- fizzbuzz_report.json

Each schema is meta-validated once, on first use.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

MAPPING_REPORT: Final[str] = "mapping_report"
FIZZBUZZ_REPORT: Final[str] = "fizzbuzz_report"


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Bundled schema by name (without extension).

    Raises:
        FileNotFoundError: if schema/<schema_name>.json does not exist
        jsonschema.SchemaError: if the file is not a valid Draft 2020-12 schema
    """
    with open(SCHEMA_DIR / f"{schema_name}.json", "r", encoding="utf-8") as f:
        schema = json.load(f)
    Draft202012Validator.check_schema(schema)
    return schema


class ReportContract:
    """Validator bound to one bundled report schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self._validator = Draft202012Validator(load_schema(schema_name))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: on the first violation found
        """
        self._validator.validate(data)

    def violations(self, data: Dict[str, Any]) -> list[str]:
        """Every violation as "<path>: <message>"; empty when data conforms."""
        return [
            f"{'/'.join(str(part) for part in error.absolute_path) or '<root>'}: {error.message}"
            for error in self._validator.iter_errors(data)
        ]


@lru_cache(maxsize=None)
def contract(schema_name: str) -> ReportContract:
    return ReportContract(schema_name)


def validate_mapping_report(data: Dict[str, Any]) -> None:
    contract(MAPPING_REPORT).validate(data)


def validate_fizzbuzz_report(data: Dict[str, Any]) -> None:
    contract(FIZZBUZZ_REPORT).validate(data)
