"""Frontier queue and lazy expansion shared by all traversals."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import TYPE_CHECKING, Generic, TypeVar

from deptrace.core.filtering import filter_deps

if TYPE_CHECKING:
    from deptrace.sources import DependencySource

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (module being expanded, items still queued)
ProgressCallback = Callable[[str, int], None]


def expand(source: DependencySource, module: str, prefix: str) -> list[str]:
    """Fetch module's direct dependencies and keep those under prefix."""
    deps = filter_deps(source.expand(module), prefix)
    logger.debug("Expanded %s: %d dependencies", module, len(deps))
    return deps


class Frontier(Generic[T]):
    """FIFO of pending work items.

    Items are pushed at the back and popped from the front, so expansion
    proceeds level by level. O(1) push and pop.
    """

    __slots__ = ("_items",)

    def __init__(self, *items: T) -> None:
        self._items: deque[T] = deque(items)

    def push(self, item: T) -> None:
        """Add an item at the back. O(1)."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the item at the front. O(1)."""
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Frontier(size={len(self._items)})"
