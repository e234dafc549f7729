"""CLI entrypoint for llvm-config-py."""

from __future__ import annotations

import logging

import rich_click as click

from llvm_config import __version__
from llvm_config.config import Settings
from llvm_config.controllers import QueryCliController, QueryCommand, QueryResult
from llvm_config.queries import QUERIES

click.rich_click.USE_MARKDOWN = True
QUERY_CONTROLLER = QueryCliController()


@click.group()
@click.version_option(version=__version__, prog_name="llvm-config-py")
@click.pass_context
def llvm_config_py(ctx: click.Context) -> None:
    """Query an LLVM installation through `llvm-config`."""

    try:
        settings = Settings.from_env()
        settings.validate()
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    logging.basicConfig(
        level=settings.log_level_number,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@llvm_config_py.command("query")
@click.argument("name", type=click.Choice(sorted(QUERIES)))
@click.option(
    "--one-per-line",
    is_flag=True,
    default=False,
    help="Print each word of flag/list queries on its own line.",
)
@click.pass_obj
def query(settings: Settings, name: str, one_per_line: bool) -> None:
    """Print the result of one `llvm-config` query."""

    _finish(
        settings,
        QUERY_CONTROLLER.query(QueryCommand(name=name, one_per_line=one_per_line)),
    )


@llvm_config_py.command("summary")
@click.pass_obj
def summary(settings: Settings) -> None:
    """Print version, install paths and build mode of the LLVM installation."""

    _finish(settings, QUERY_CONTROLLER.summary())


@llvm_config_py.command("list")
def list_queries() -> None:
    """List available query names."""

    _emit_lines(QUERY_CONTROLLER.list_queries())


def _finish(settings: Settings, result: QueryResult) -> None:
    _emit_lines(result.lines)
    if result.success:
        return
    if settings.show_stderr and result.stderr:
        click.echo(result.stderr, err=True)
    raise click.ClickException(result.error or "llvm-config query failed.")


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    llvm_config_py()
