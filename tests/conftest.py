"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field

from idarena import Arena, Id


@pytest.fixture
def arena():
    """Fresh Arena with the default behavior."""
    return Arena()


@dataclass(slots=True)
class FixtureNode:
    name: str
    children: list[Id] = field(default_factory=list)
    parent: Id | None = None


@pytest.fixture
def node_cls():
    return FixtureNode
