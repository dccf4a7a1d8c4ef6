"""
Core module: exceptions, namespace filtering, and the traversal engine.

Exceptions (exceptions.py):
    - DeptraceError: Base exception for all deptrace errors
    - FetchError: A module's dependencies could not be fetched
    - DependencyNotFoundError: Root does not depend on target

Filtering (filtering.py):
    - filter_deps: Keep dependencies under the project prefix
    - DEFAULT_PREFIX: The project namespace

Graph (graph/):
    - build_tree, find_path, find_all_paths: BFS over lazily fetched edges
"""

from deptrace.core.exceptions import (
    DependencyNotFoundError,
    DeptraceError,
    FetchError,
)
from deptrace.core.filtering import DEFAULT_PREFIX, filter_deps

__all__ = [
    # Exceptions
    "DeptraceError",
    "FetchError",
    "DependencyNotFoundError",
    # Filtering
    "DEFAULT_PREFIX",
    "filter_deps",
]
