"""Shared fixtures: in-memory dependency sources."""

from collections.abc import Callable

import pytest

from deptrace.core.exceptions import FetchError


class StaticSource:
    """DependencySource backed by a fixed adjacency table.

    Records every expand() call so tests can check how often each module
    was fetched. Unknown modules fail like a missing package would.
    """

    def __init__(self, edges: dict[str, list[str]]) -> None:
        self.edges = edges
        self.calls: list[str] = []

    def expand(self, module: str) -> list[str]:
        self.calls.append(module)
        if module not in self.edges:
            raise FetchError(module, f'cannot find package "{module}"')
        return list(self.edges[module])


SourceFactory = Callable[[dict[str, list[str]]], StaticSource]


@pytest.fixture
def make_source() -> SourceFactory:
    """Build a StaticSource from an adjacency dict."""
    return StaticSource


@pytest.fixture
def linear_source() -> StaticSource:
    """A -> B -> C -> D."""
    return StaticSource({"A": ["B"], "B": ["C"], "C": ["D"], "D": []})


@pytest.fixture
def diamond_source() -> StaticSource:
    """A -> {B, C}, B -> D, C -> D (diamond shape)."""
    return StaticSource({"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []})


@pytest.fixture
def cyclic_source() -> StaticSource:
    """A -> B -> C -> A."""
    return StaticSource({"A": ["B"], "B": ["C"], "C": ["A"]})


@pytest.fixture
def disconnected_source() -> StaticSource:
    """A -> B, C -> D (two separate components)."""
    return StaticSource({"A": ["B"], "B": [], "C": ["D"], "D": []})
