"""Dependency source backed by `go list`."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from deptrace.core.exceptions import FetchError

logger = logging.getLogger(__name__)

GO_LIST_COMMAND = ("go", "list", "-f", "'{{.Imports}}'")

# go list prints the import slice as '[a b c]'
_DELIMITERS = "'[]\n"


def parse_deps(raw: str) -> list[str]:
    """Split raw `go list` output into import paths."""
    return raw.strip(_DELIMITERS).split()


class GoListSource:
    """Fetches direct imports by running `go list` once per module."""

    def __init__(self, command: Sequence[str] = GO_LIST_COMMAND) -> None:
        self._command = tuple(command)

    def expand(self, module: str) -> list[str]:
        args = [*self._command, module]
        logger.debug("Running %s", " ".join(args))

        try:
            result = subprocess.run(args, capture_output=True, text=True)
        except OSError as e:
            logger.warning("Cannot run %s: %s", args[0], e)
            raise FetchError(module, str(e)) from e

        if result.returncode != 0:
            detail = result.stderr.strip() or result.stdout.strip()
            detail = detail or f"exit status {result.returncode}"
            logger.warning("go list failed for %s: %s", module, detail)
            raise FetchError(module, detail)

        return parse_deps(result.stdout)
