"""Plain-text and JSON rendering of traversal results."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from deptrace.core.graph.models import Path, TreeNode

_INDENT = "  "


def tree_lines(node: TreeNode, prefix: str = "") -> Iterator[str]:
    """Yield the tree depth-first, indenting each level by two spaces."""
    yield f"{prefix}{node.module}"
    child_prefix = prefix + _INDENT
    for child in node.children:
        yield from tree_lines(child, child_prefix)


def path_lines(path: Path) -> list[str]:
    """One module per line, root first."""
    return list(path)


def paths_lines(paths: Sequence[Path]) -> Iterator[str]:
    """Each path preceded by a blank line."""
    for path in paths:
        yield ""
        yield from path_lines(path)


def tree_to_dict(node: TreeNode) -> dict[str, Any]:
    """Convert a TreeNode to a JSON-serializable dict."""
    return {
        "module": node.module,
        "children": [tree_to_dict(c) for c in node.children],
    }
