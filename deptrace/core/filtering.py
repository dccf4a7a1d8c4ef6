"""Namespace filter applied to every expansion."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_PREFIX = "github.com/juju/juju"


def filter_deps(deps: Iterable[str], prefix: str = DEFAULT_PREFIX) -> list[str]:
    """Keep only dependencies inside the project namespace, in input order."""
    return [dep for dep in deps if dep.startswith(prefix)]
