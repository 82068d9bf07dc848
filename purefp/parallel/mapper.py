"""
Mapper: Sequential & Scatter-Gather Parallel Map over Pure Functions

output[i] == func(items[i]) for every i, in input order, whatever the strategy.

Parallel strategy:
- input partitioned into disjoint contiguous chunks (chunk_size or heuristic)
- each chunk evaluated eagerly by an independent worker
- caller blocks until every chunk completes, then concatenates in chunk order

CRITICAL INVARIANTS:
1. sequential_map(f, xs) == parallel_map(f, xs) for every pure f and finite xs
2. Finite input only: items must be Sized; iterators/generators -> UnboundedInputError
3. Eager evaluation: lazy element results (iterators) -> MappingFailure(LazyResultError)
4. Fail-fast: the first failure aborts the whole map; no partial output is returned
5. Deadline: timeout discards the whole operation (MappingTimeout), never partial output

Purity of func is a caller obligation: no shared mutable state, no effects.
With ExecutorKind.PROCESS, func must be picklable (module-level function).
"""

import math
import os
from collections.abc import Iterable, Iterator, Sized
from concurrent.futures import (
    FIRST_EXCEPTION,
    Executor,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    wait,
)
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, Optional, TypeVar, Union

from purefp.logger import get_logger

logger = get_logger(__name__)

A = TypeVar("A")
B = TypeVar("B")


# =============================================================================
# CONSTANTS
# =============================================================================

# Chunks per worker when chunk_size is not given
CHUNKS_PER_WORKER: Final[int] = 4


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MapperError(Exception):
    """Base class for mapper failures."""


class UnboundedInputError(MapperError, TypeError):
    """
    Input has no known length.

    The mapper only accepts finite, Sized collections (list, tuple, range, ...).
    Iterators, generators and periodic sequences are rejected before any work
    starts instead of hanging on an infinite input.
    """

    def __init__(self, type_name: str):
        super().__init__(type_name)
        self.type_name = type_name

    def __str__(self) -> str:
        return (
            f"Mapper requires a finite Sized collection, got {self.type_name}. "
            f"Materialize a finite prefix first (e.g. list(islice(xs, n)))."
        )


class LazyResultError(MapperError, TypeError):
    """Mapped function returned a lazy iterator instead of a realized value."""

    def __init__(self, type_name: str):
        super().__init__(type_name)
        self.type_name = type_name

    def __str__(self) -> str:
        return (
            f"Mapped function returned a lazy {self.type_name}; "
            f"results must be fully evaluated (return a list/tuple instead)."
        )


class MappingFailure(MapperError):
    """
    func failed for one input element; the whole map is aborted.

    Attributes:
        index: Position of the failing element in the input
        cause: Exception raised by func (or LazyResultError)
    """

    def __init__(self, index: int, cause: BaseException):
        super().__init__(index, cause)
        self.index = index
        self.cause = cause

    def __str__(self) -> str:
        return (
            f"Mapping failed at input index {self.index}: "
            f"{type(self.cause).__name__}: {self.cause}"
        )


class MappingTimeout(MapperError):
    """Parallel map did not finish within the deadline; no output is returned."""

    def __init__(self, timeout_sec: float, pending_chunks: int):
        super().__init__(timeout_sec, pending_chunks)
        self.timeout_sec = timeout_sec
        self.pending_chunks = pending_chunks

    def __str__(self) -> str:
        return (
            f"Parallel map exceeded deadline of {self.timeout_sec}s "
            f"with {self.pending_chunks} chunk(s) unfinished"
        )


# =============================================================================
# CONFIG
# =============================================================================


class MapStrategy(str, Enum):
    """Execution strategy."""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


class ExecutorKind(str, Enum):
    """Worker pool implementation for the parallel strategy."""

    THREAD = "thread"
    PROCESS = "process"


@dataclass(frozen=True)
class MapperConfig:
    """
    Parallel map configuration.

    Attributes:
        max_workers: Pool size; None -> os.cpu_count()
        chunk_size: Elements per chunk; None -> heuristic (CHUNKS_PER_WORKER)
        executor: THREAD (any callable) or PROCESS (picklable callables, CPU-bound work)
        timeout_sec: Deadline for the whole map; None -> wait indefinitely
    """

    max_workers: Optional[int] = None
    chunk_size: Optional[int] = None
    executor: ExecutorKind = ExecutorKind.THREAD
    timeout_sec: Optional[float] = None

    def __post_init__(self):
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.chunk_size is not None and self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if self.timeout_sec is not None and not self.timeout_sec > 0:
            raise ValueError(f"timeout_sec must be positive, got {self.timeout_sec}")
        # Accept plain strings ("thread"/"process") from settings and CLI
        object.__setattr__(self, "executor", ExecutorKind(self.executor))

    def resolved_workers(self) -> int:
        return self.max_workers or os.cpu_count() or 1


# =============================================================================
# CHUNKING
# =============================================================================


def resolve_chunk_size(length: int, workers: int, chunk_size: Optional[int] = None) -> int:
    """
    Chunk size for `length` elements spread over `workers`.

    Args:
        length: Number of input elements
        workers: Pool size
        chunk_size: Explicit size (wins when given)

    Returns:
        chunk_size if given, else ceil(length / (workers * CHUNKS_PER_WORKER)), min 1

    Examples:
        >>> resolve_chunk_size(100, 4)
        7
        >>> resolve_chunk_size(5, 8)
        1
        >>> resolve_chunk_size(5, 8, chunk_size=2)
        2
    """
    if chunk_size is not None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        return chunk_size
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    return max(1, math.ceil(length / (workers * CHUNKS_PER_WORKER)))


def chunk_bounds(length: int, chunk_size: int) -> list[tuple[int, int]]:
    """
    Disjoint, contiguous, ordered [start, stop) slices covering range(length).

    Examples:
        >>> chunk_bounds(5, 2)
        [(0, 2), (2, 4), (4, 5)]
        >>> chunk_bounds(0, 3)
        []
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    return [(start, min(start + chunk_size, length)) for start in range(0, length, chunk_size)]


# =============================================================================
# WORKER
# =============================================================================


def materialize(items: Iterable[A]) -> list[A]:
    """
    Snapshot a finite input, iterating it exactly once.

    Raises:
        UnboundedInputError: if items is an iterator or has no length
    """
    if isinstance(items, Iterator) or not isinstance(items, Sized):
        raise UnboundedInputError(type(items).__name__)
    return list(items)


def _force(value: B) -> B:
    """Reject deferred results so every element is realized inside its worker."""
    if isinstance(value, Iterator):
        raise LazyResultError(type(value).__name__)
    return value


def _map_chunk(func: Callable[[A], B], start: int, chunk: list[A]) -> list[B]:
    """
    Eagerly map one chunk.

    Module-level so that process pools can pickle it.

    Raises:
        MappingFailure: carrying the global element index (start + offset)
    """
    results = []
    for offset, item in enumerate(chunk):
        try:
            results.append(_force(func(item)))
        except Exception as exc:
            raise MappingFailure(start + offset, exc) from exc
    return results


def _create_executor(kind: ExecutorKind, workers: int) -> Executor:
    if kind == ExecutorKind.PROCESS:
        return ProcessPoolExecutor(max_workers=workers)
    return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="purefp-map")


# =============================================================================
# PUBLIC API
# =============================================================================


def sequential_map(func: Callable[[A], B], items: Iterable[A]) -> list[B]:
    """
    Map func over a finite collection on the calling thread.

    Raises:
        UnboundedInputError: if items has no length
        MappingFailure: at the first failing element
    """
    values = materialize(items)
    return _map_chunk(func, 0, values)


def parallel_map(
    func: Callable[[A], B],
    items: Iterable[A],
    config: Optional[MapperConfig] = None,
) -> list[B]:
    """
    Scatter-gather map over a worker pool.

    Args:
        func: Pure function
        items: Finite Sized collection
        config: Pool size, granularity, executor kind, deadline

    Returns:
        [func(x) for x in items], in input order

    Raises:
        UnboundedInputError: if items has no length
        MappingFailure: first failure observed (lowest index among failed chunks)
        MappingTimeout: if the deadline passes before all chunks complete
    """
    config = config or MapperConfig()
    values = materialize(items)
    if not values:
        return []

    workers = config.resolved_workers()
    size = resolve_chunk_size(len(values), workers, config.chunk_size)
    bounds = chunk_bounds(len(values), size)
    workers = min(workers, len(bounds))

    logger.debug(
        "Parallel map: %d elements, %d chunk(s) of <= %d, %d %s worker(s)",
        len(values),
        len(bounds),
        size,
        workers,
        config.executor.value,
    )

    executor = _create_executor(config.executor, workers)
    completed = False
    try:
        futures = [
            executor.submit(_map_chunk, func, start, values[start:stop])
            for start, stop in bounds
        ]
        done, not_done = wait(futures, timeout=config.timeout_sec, return_when=FIRST_EXCEPTION)

        errors = [
            future.exception()
            for future in futures
            if future in done and future.exception() is not None
        ]
        if errors:
            for future in not_done:
                future.cancel()
            failures = [error for error in errors if isinstance(error, MappingFailure)]
            if not failures:
                # Pool-level error (e.g. unpicklable func) rather than an element failure
                logger.warning("Parallel map aborted: %s", errors[0])
                raise errors[0]
            failure = min(failures, key=lambda error: error.index)
            logger.warning("Parallel map aborted: %s", failure)
            raise failure

        if not_done:
            timeout = MappingTimeout(config.timeout_sec, len(not_done))
            logger.warning("%s", timeout)
            raise timeout

        results: list[B] = []
        for future in futures:
            results.extend(future.result())
        completed = True
        return results
    finally:
        # On abort, drop queued chunks and do not block on running ones
        executor.shutdown(wait=completed, cancel_futures=not completed)


def map_pure(
    func: Callable[[A], B],
    items: Iterable[A],
    strategy: Union[MapStrategy, str] = MapStrategy.SEQUENTIAL,
    config: Optional[MapperConfig] = None,
) -> list[B]:
    """
    Single entry point for both strategies.

    config is ignored by the sequential strategy.
    """
    strategy = MapStrategy(strategy)
    if strategy == MapStrategy.PARALLEL:
        return parallel_map(func, items, config)
    return sequential_map(func, items)
