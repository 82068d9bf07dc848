"""
Parallel mapping over pure functions.

Sequential and scatter-gather parallel strategies with identical results.
"""

from purefp.parallel.mapper import (
    CHUNKS_PER_WORKER,
    ExecutorKind,
    LazyResultError,
    MapperConfig,
    MapperError,
    MappingFailure,
    MappingTimeout,
    MapStrategy,
    UnboundedInputError,
    chunk_bounds,
    map_pure,
    materialize,
    parallel_map,
    resolve_chunk_size,
    sequential_map,
)

__all__ = [
    # Constants
    "CHUNKS_PER_WORKER",
    # Exceptions
    "MapperError",
    "UnboundedInputError",
    "LazyResultError",
    "MappingFailure",
    "MappingTimeout",
    # Config
    "MapStrategy",
    "ExecutorKind",
    "MapperConfig",
    # Functions
    "chunk_bounds",
    "materialize",
    "resolve_chunk_size",
    "sequential_map",
    "parallel_map",
    "map_pure",
]
