"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for parallel
arena traversal.

Usage:
    from idarena.config import ParallelSettings

    # Load from environment variables (IDARENA_PARALLEL_*)
    settings = ParallelSettings()

    # Or override with explicit values
    settings = ParallelSettings(max_workers=4, chunk_size=256)
    arena.par_iter(settings=settings).for_each(visit)
"""

from __future__ import annotations

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install idarena"
    ) from e


class ParallelSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for parallel arena traversal.

    Attributes:
        max_workers: Thread pool size (None lets ThreadPoolExecutor decide).
        chunk_size: Number of consecutive slots handed to one worker task.
        max_concurrent: Max in-flight coroutines for async traversal
            (None = unlimited).

    Environment Variables:
        IDARENA_PARALLEL_MAX_WORKERS
        IDARENA_PARALLEL_CHUNK_SIZE
        IDARENA_PARALLEL_MAX_CONCURRENT
    """

    model_config = SettingsConfigDict(
        env_prefix="IDARENA_PARALLEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_workers: int | None = Field(default=None, ge=1)
    chunk_size: int = Field(default=64, ge=1)
    max_concurrent: int | None = Field(default=None, ge=1)
