"""
Settings: environment-driven defaults for the mapper and logging

Environment variables (empty values keep the default):
    PUREFP_MAX_WORKERS   pool size (int >= 1)
    PUREFP_CHUNK_SIZE    elements per chunk (int >= 1)
    PUREFP_EXECUTOR      thread | process
    PUREFP_TIMEOUT_SEC   deadline for a parallel map (float > 0)
    LOG_LEVEL            DEBUG | INFO | WARNING | ERROR | CRITICAL
"""

from typing import Final, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from purefp.parallel.mapper import ExecutorKind, MapperConfig

LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Mapper and logging defaults, read from the environment on construction.

    Raises:
        pydantic.ValidationError: on malformed values
    """

    model_config = SettingsConfigDict(
        env_prefix="PUREFP_",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    max_workers: Optional[int] = Field(None, ge=1, description="Pool size (None -> cpu count)")
    chunk_size: Optional[int] = Field(None, ge=1, description="Elements per chunk (None -> heuristic)")
    executor: ExecutorKind = Field(ExecutorKind.THREAD, description="Worker pool kind")
    timeout_sec: Optional[float] = Field(None, gt=0, description="Parallel map deadline")
    # Shared with the logger, so no PUREFP_ prefix
    log_level: str = Field("WARNING", validation_alias="LOG_LEVEL", description="Package log level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}, got {v!r}")
        return level

    def mapper_config(
        self,
        max_workers: Optional[int] = None,
        chunk_size: Optional[int] = None,
        executor: Optional[ExecutorKind] = None,
        timeout_sec: Optional[float] = None,
    ) -> MapperConfig:
        """MapperConfig from these settings; explicit arguments win."""
        return MapperConfig(
            max_workers=max_workers if max_workers is not None else self.max_workers,
            chunk_size=chunk_size if chunk_size is not None else self.chunk_size,
            executor=executor if executor is not None else self.executor,
            timeout_sec=timeout_sec if timeout_sec is not None else self.timeout_sec,
        )
