"""Path finding algorithms: BFS first path, BFS discovered paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deptrace.core.exceptions import DependencyNotFoundError
from deptrace.core.filtering import DEFAULT_PREFIX
from deptrace.core.graph.base import Frontier, ProgressCallback, expand
from deptrace.core.graph.models import Path

if TYPE_CHECKING:
    from deptrace.sources import DependencySource


def find_path(
    source: DependencySource,
    root: str,
    target: str,
    *,
    prefix: str = DEFAULT_PREFIX,
    on_progress: ProgressCallback | None = None,
) -> Path:
    """Find a shortest import path from root to target using BFS.

    Modules are marked visited when popped, and the search stops at the
    first edge into target, so the result has the fewest edges.

    Raises DependencyNotFoundError if target is unreachable.
    """
    visited: set[str] = set()
    queue: Frontier[Path] = Frontier(Path.of(root))

    while queue:
        path = queue.pop()
        pkg = path.last
        if pkg in visited:
            continue
        visited.add(pkg)

        if on_progress:
            on_progress(pkg, len(queue))

        for dep in expand(source, pkg, prefix):
            new_path = path.append(dep)
            if dep == target:
                return new_path
            queue.push(new_path)

    raise DependencyNotFoundError(root, target)


def find_all_paths(
    source: DependencySource,
    root: str,
    target: str,
    *,
    prefix: str = DEFAULT_PREFIX,
    on_progress: ProgressCallback | None = None,
) -> list[Path]:
    """Collect every path to target discovered by a full BFS.

    A module is marked visited as soon as it is discovered, so only the
    first route through any intermediate module is followed. Paths through
    a module reached later by another route are not reported. Target itself
    is never queued.

    Returns paths in discovery order, or an empty list.
    """
    paths: list[Path] = []
    visited: set[str] = set()
    queue: Frontier[Path] = Frontier(Path.of(root))

    while queue:
        path = queue.pop()
        pkg = path.last

        if on_progress:
            on_progress(pkg, len(queue))

        for dep in expand(source, pkg, prefix):
            new_path = path.append(dep)
            if dep == target:
                paths.append(new_path)
            elif dep not in visited:
                visited.add(dep)
                queue.push(new_path)

    return paths
