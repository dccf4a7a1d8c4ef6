"""Data models for graph operations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A module in the dependency tree.

    Children are owned by their parent and only ever appended.
    """

    module: str
    children: list[TreeNode] = field(default_factory=list)

    def add_child(self, module: str) -> TreeNode:
        """Append a new child for module and return it."""
        child = TreeNode(module)
        self.children.append(child)
        return child

    def __iter__(self) -> Iterator[TreeNode]:
        """Pre-order traversal."""
        yield self
        for child in self.children:
            yield from child

    def __len__(self) -> int:
        """Total nodes in subtree."""
        return 1 + sum(len(c) for c in self.children)


@dataclass(frozen=True)
class Path:
    """A walk through the import graph, root first.

    Immutable: append() returns a new Path and leaves the receiver untouched,
    so paths sharing a prefix never see each other's elements.
    """

    modules: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.modules:
            raise ValueError("Path must contain at least one module")

    @classmethod
    def of(cls, *modules: str) -> Path:
        return cls(tuple(modules))

    @property
    def root(self) -> str:
        return self.modules[0]

    @property
    def last(self) -> str:
        return self.modules[-1]

    def append(self, module: str) -> Path:
        return Path(self.modules + (module,))

    def __len__(self) -> int:
        return len(self.modules)

    def __iter__(self) -> Iterator[str]:
        return iter(self.modules)

    def __repr__(self) -> str:
        names = " -> ".join(self.modules)
        return f"Path({names})"
