"""
purefp: pure-function demonstrations.

- Parallel mapping: sequential and scatter-gather strategies with identical results
- Option monoid: FizzBuzz from periodic label patterns combined position-wise
"""

from purefp.core.algebra import ABSENT, Absent, Present, combine, overlay, present
from purefp.core.sequences import PeriodicSequence, periodic
from purefp.fizzbuzz import fizzbuzz, fizzbuzz_lines
from purefp.parallel import (
    MapperConfig,
    MappingFailure,
    MapStrategy,
    map_pure,
    parallel_map,
    sequential_map,
)

__version__ = "0.1.0"

__all__ = [
    # Parallel mapping
    "MapStrategy",
    "MapperConfig",
    "MappingFailure",
    "map_pure",
    "sequential_map",
    "parallel_map",
    # Option algebra
    "Present",
    "Absent",
    "ABSENT",
    "present",
    "combine",
    "overlay",
    # Sequences
    "PeriodicSequence",
    "periodic",
    # FizzBuzz
    "fizzbuzz",
    "fizzbuzz_lines",
]
