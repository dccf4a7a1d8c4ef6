"""Unit tests for dependency sources and namespace filtering."""

import subprocess

import pytest

from deptrace.core.exceptions import FetchError
from deptrace.core.filtering import DEFAULT_PREFIX, filter_deps
from deptrace.sources import GO_LIST_COMMAND, GoListSource, parse_deps

JUJU = "github.com/juju/juju"


def completed(returncode: int = 0, stdout: str = "", stderr: str = ""):
    """Build a fake subprocess.run replacement returning a fixed result."""
    calls: list[list[str]] = []

    def run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)

    run.calls = calls  # type: ignore[attr-defined]
    return run


class TestFilterDeps:
    """Tests for the namespace filter."""

    def test_empty_input(self) -> None:
        assert filter_deps([]) == []

    def test_no_matches(self) -> None:
        assert filter_deps(["fmt", "os", "github.com/pkg/errors"]) == []

    def test_mixed_keeps_order(self) -> None:
        deps = [f"{JUJU}/state", "fmt", f"{JUJU}/api", "os", f"{JUJU}/core"]
        assert filter_deps(deps) == [f"{JUJU}/state", f"{JUJU}/api", f"{JUJU}/core"]

    def test_custom_prefix(self) -> None:
        assert filter_deps(["example.com/a", "fmt"], "example.com/") == ["example.com/a"]

    def test_empty_prefix_keeps_everything(self) -> None:
        assert filter_deps(["b", "a"], "") == ["b", "a"]

    def test_default_prefix(self) -> None:
        assert DEFAULT_PREFIX == JUJU


class TestParseDeps:
    """Tests for go list output parsing."""

    def test_quoted_list(self) -> None:
        raw = f"'[fmt {JUJU}/state os]'\n"
        assert parse_deps(raw) == ["fmt", f"{JUJU}/state", "os"]

    def test_unquoted_list(self) -> None:
        assert parse_deps("[fmt os]\n") == ["fmt", "os"]

    def test_empty_list(self) -> None:
        assert parse_deps("'[]'\n") == []

    def test_empty_output(self) -> None:
        assert parse_deps("") == []


class TestGoListSource:
    """Tests for the go list backed source."""

    def test_runs_go_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        run = completed(stdout=f"'[fmt {JUJU}/state]'\n")
        monkeypatch.setattr(subprocess, "run", run)

        deps = GoListSource().expand(f"{JUJU}/cmd")

        assert deps == ["fmt", f"{JUJU}/state"]
        assert run.calls == [[*GO_LIST_COMMAND, f"{JUJU}/cmd"]]

    def test_custom_command(self, monkeypatch: pytest.MonkeyPatch) -> None:
        run = completed(stdout="[a b]\n")
        monkeypatch.setattr(subprocess, "run", run)

        GoListSource(["go", "list", "-f", "{{.Deps}}"]).expand("pkg")

        assert run.calls == [["go", "list", "-f", "{{.Deps}}", "pkg"]]

    def test_non_zero_exit_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        stderr = 'cannot find package "nope"\n'
        monkeypatch.setattr(subprocess, "run", completed(returncode=1, stderr=stderr))

        with pytest.raises(FetchError) as exc_info:
            GoListSource().expand("nope")

        assert exc_info.value.module == "nope"
        assert exc_info.value.detail == 'cannot find package "nope"'
        assert "nope" in str(exc_info.value)

    def test_non_zero_exit_without_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(subprocess, "run", completed(returncode=2))

        with pytest.raises(FetchError) as exc_info:
            GoListSource().expand("pkg")

        assert exc_info.value.detail == "exit status 2"

    def test_missing_binary_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def run(args, **kwargs):
            raise FileNotFoundError(2, "No such file or directory", args[0])

        monkeypatch.setattr(subprocess, "run", run)

        with pytest.raises(FetchError) as exc_info:
            GoListSource().expand("pkg")

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
