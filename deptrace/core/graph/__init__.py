"""
Import graph data structures and algorithms.

The graph is never loaded up front: every traversal pulls one module's
edges at a time from a DependencySource and filters them to the project
namespace.

Data Structures:
    - Frontier: FIFO work queue giving breadth-first order
    - TreeNode: Tree representation of a module's dependencies
    - Path: Immutable sequence of modules from root to a frontier node

Algorithms:
    - traversal: BFS tree extraction (build_tree)
    - pathfinding: BFS first path (find_path), BFS discovered paths (find_all_paths)
"""

from deptrace.core.graph.base import Frontier, ProgressCallback, expand
from deptrace.core.graph.models import Path, TreeNode
from deptrace.core.graph.pathfinding import find_all_paths, find_path
from deptrace.core.graph.traversal import build_tree

__all__ = [
    "Frontier",
    "Path",
    "ProgressCallback",
    "TreeNode",
    "build_tree",
    "expand",
    "find_all_paths",
    "find_path",
]
