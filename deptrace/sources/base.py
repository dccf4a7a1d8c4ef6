"""Protocol for dependency sources."""

from __future__ import annotations

from typing import Protocol


class DependencySource(Protocol):
    """Protocol for lazily fetching a module's outgoing edges."""

    def expand(self, module: str) -> list[str]:
        """Return the direct dependencies of module, unfiltered.

        Raises FetchError if the dependencies cannot be obtained.
        """
        ...
