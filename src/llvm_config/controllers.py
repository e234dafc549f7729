"""Controllers for llvm-config-py CLI commands."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from llvm_config.errors import BadExitCodeError, LlvmConfigError
from llvm_config.queries import QUERIES, TOKENIZED_QUERIES

SUMMARY_QUERIES: tuple[str, ...] = (
    "version",
    "prefix",
    "bin-dir",
    "include-dir",
    "lib-dir",
    "cmake-dir",
    "host-target",
    "build-mode",
)


@dataclass(slots=True)
class QueryCommand:
    """CLI input for a single query."""

    name: str
    one_per_line: bool = False


@dataclass(slots=True)
class QueryResult:
    """Rendered output of one CLI command."""

    lines: list[str]
    success: bool
    error: str | None = None
    stderr: str = ""


class QueryCliController:
    """Run façade queries and render their results as output lines."""

    def query(self, command: QueryCommand) -> QueryResult:
        if command.name not in QUERIES:
            return QueryResult(
                lines=[],
                success=False,
                error=f"Unsupported query: {command.name!r}",
            )
        try:
            value = QUERIES[command.name]()
            if command.name in TOKENIZED_QUERIES:
                lines = _render_words(value, one_per_line=command.one_per_line)
            else:
                lines = [_render_value(value)]
        except LlvmConfigError as error:
            return _failure([], error)
        return QueryResult(lines=lines, success=True)

    def summary(self) -> QueryResult:
        lines: list[str] = []
        for name in SUMMARY_QUERIES:
            try:
                value = QUERIES[name]()
            except LlvmConfigError as error:
                return _failure(lines, error)
            lines.append(f"{name}: {_render_value(value)}")
        return QueryResult(lines=lines, success=True)

    def list_queries(self) -> list[str]:
        return [
            f"{name} (words)" if name in TOKENIZED_QUERIES else name
            for name in QUERIES
        ]


def _render_words(words: Iterable[str], *, one_per_line: bool) -> list[str]:
    if one_per_line:
        return list(words)
    return [" ".join(words)]


def _render_value(value: object) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def _failure(lines: list[str], error: LlvmConfigError) -> QueryResult:
    stderr = ""
    if isinstance(error, BadExitCodeError):
        stderr = error.output.stderr.decode("utf-8", errors="replace").strip()
    return QueryResult(lines=lines, success=False, error=str(error), stderr=stderr)
