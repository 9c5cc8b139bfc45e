"""Tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from idarena.config import ParallelSettings


def test_defaults(monkeypatch):
    for name in ("MAX_WORKERS", "CHUNK_SIZE", "MAX_CONCURRENT"):
        monkeypatch.delenv(f"IDARENA_PARALLEL_{name}", raising=False)

    settings = ParallelSettings()

    assert settings.max_workers is None
    assert settings.chunk_size == 64
    assert settings.max_concurrent is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("IDARENA_PARALLEL_MAX_WORKERS", "2")
    monkeypatch.setenv("IDARENA_PARALLEL_CHUNK_SIZE", "500")
    monkeypatch.setenv("IDARENA_PARALLEL_MAX_CONCURRENT", "16")

    settings = ParallelSettings()

    assert settings.max_workers == 2
    assert settings.chunk_size == 500
    assert settings.max_concurrent == 16


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("IDARENA_PARALLEL_CHUNK_SIZE", "500")
    assert ParallelSettings(chunk_size=8).chunk_size == 8


@pytest.mark.parametrize("field", ["max_workers", "chunk_size", "max_concurrent"])
def test_non_positive_values_rejected(field):
    with pytest.raises(ValidationError):
        ParallelSettings(**{field: 0})
