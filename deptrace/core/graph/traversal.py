"""Dependency tree extraction using BFS traversal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deptrace.core.filtering import DEFAULT_PREFIX
from deptrace.core.graph.base import Frontier, ProgressCallback, expand
from deptrace.core.graph.models import TreeNode

if TYPE_CHECKING:
    from deptrace.sources import DependencySource


def build_tree(
    source: DependencySource,
    root: str,
    *,
    prefix: str = DEFAULT_PREFIX,
    on_progress: ProgressCallback | None = None,
) -> TreeNode:
    """Build the dependency tree under root.

    BFS that expands each module once. A module reached again is still
    attached to its new parent, but stays childless. O(V + E) fetches
    bounded by V.

    Raises FetchError from the source; no partial tree is returned.
    """
    base = TreeNode(root)
    visited: set[str] = set()
    queue: Frontier[TreeNode] = Frontier(base)

    while queue:
        node = queue.pop()
        if node.module in visited:
            continue
        visited.add(node.module)

        if on_progress:
            on_progress(node.module, len(queue))

        for dep in expand(source, node.module, prefix):
            queue.push(node.add_child(dep))

    return base

