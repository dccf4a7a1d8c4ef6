"""Deptrace custom exceptions."""


class DeptraceError(Exception):
    """Base exception for Deptrace errors."""


class FetchError(DeptraceError):
    """The dependency query for a module failed."""

    def __init__(self, module: str, detail: str) -> None:
        self.module = module
        self.detail = detail
        super().__init__(f"go list {module}: {detail}")


class DependencyNotFoundError(DeptraceError):
    """Root does not (transitively) depend on target."""

    def __init__(self, root: str, target: str) -> None:
        self.root = root
        self.target = target
        super().__init__(f'"{root}" does not depend on "{target}"')
