"""
Reports: serializable results of the demonstrations

Immutable Pydantic models. model_dump(mode="json") matches the JSON Schema
contracts in purefp/core/contracts/schema/ (mapping_report.json,
fizzbuzz_report.json).
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from purefp.parallel.mapper import ExecutorKind, MapStrategy


# =============================================================================
# MAPPING REPORT
# =============================================================================


class MappingReport(BaseModel):
    """
    Result of mapping a pure function over a finite input.

    inputs[i] and outputs[i] form the i-th board/value pair.
    """

    function: str = Field(..., min_length=1, description="Name of the mapped function")
    strategy: MapStrategy = Field(..., description="SEQUENTIAL or PARALLEL")
    executor: Optional[ExecutorKind] = Field(
        None, description="Worker pool kind (parallel strategy only)"
    )
    max_workers: Optional[int] = Field(None, ge=1, description="Pool size")
    chunk_size: Optional[int] = Field(None, ge=1, description="Elements per chunk")
    count: int = Field(..., ge=0, description="Number of mapped elements")
    inputs: list[Any] = Field(..., description="Input elements, in order")
    outputs: list[Any] = Field(..., description="func(input[i]), in order")

    model_config = {"frozen": True}

    @field_validator("inputs")
    @classmethod
    def validate_inputs_count(cls, v: list[Any], info) -> list[Any]:
        """len(inputs) == count"""
        if "count" in info.data and len(v) != info.data["count"]:
            raise ValueError(f"inputs has {len(v)} elements, expected count={info.data['count']}")
        return v

    @field_validator("outputs")
    @classmethod
    def validate_outputs_aligned(cls, v: list[Any], info) -> list[Any]:
        """One output per input"""
        if "inputs" in info.data and len(v) != len(info.data["inputs"]):
            raise ValueError(
                f"outputs has {len(v)} elements, inputs has {len(info.data['inputs'])}"
            )
        return v


# =============================================================================
# FIZZBUZZ REPORT
# =============================================================================


class FizzBuzzReport(BaseModel):
    """Finite prefix of the FizzBuzz overlay sequence."""

    count: int = Field(..., ge=0, description="Number of lines")
    lines: list[str] = Field(..., description="Line i is the label or numeral for i + 1")

    model_config = {"frozen": True}

    @field_validator("lines")
    @classmethod
    def validate_lines_count(cls, v: list[str], info) -> list[str]:
        """len(lines) == count"""
        if "count" in info.data and len(v) != info.data["count"]:
            raise ValueError(f"lines has {len(v)} elements, expected count={info.data['count']}")
        return v
