"""
Dependency sources: where the traversal engine gets its edges.

The engine never sees the whole graph. It asks a source for one module's
direct dependencies at a time, so any object with an ``expand`` method can
drive it.

Components:
    - DependencySource: Protocol defining the source interface
    - GoListSource: Runs ``go list -f '{{.Imports}}'`` per module
    - parse_deps: Splits ``go list`` output into import paths

Adding a new source:
    1. Create a class implementing the DependencySource protocol
    2. Implement expand() to return the module's direct dependencies
    3. Raise FetchError when the dependencies cannot be obtained
"""

from deptrace.sources.base import DependencySource
from deptrace.sources.golist import GO_LIST_COMMAND, GoListSource, parse_deps

__all__ = [
    "DependencySource",
    "GO_LIST_COMMAND",
    "GoListSource",
    "parse_deps",
]
