"""Configuration module using Pydantic Settings.

Usage:
    from idarena.config import ParallelSettings

    settings = ParallelSettings(max_workers=8)
"""

from idarena.config.settings import ParallelSettings

__all__ = [
    "ParallelSettings",
]
