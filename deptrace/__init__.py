"""
Deptrace: Import graph traversal for Go codebases.

Deptrace asks ``go list`` for one package's imports at a time and walks the
resulting graph breadth-first, enabling you to:
- Print the dependency tree under a package
- Find the shortest import path between two packages
- List the import paths between two packages

Usage:
    from deptrace.core.graph import find_path
    from deptrace.sources import GoListSource

    path = find_path(GoListSource(), "github.com/juju/juju/cmd/juju", "github.com/juju/juju/state")
    print(list(path))
"""

__version__ = "0.1.0"
