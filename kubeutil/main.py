"""kubeutil command line.

Prints the utilization tables with rich, or launches the interactive shell.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.text import Text

from kubeutil import __version__
from kubeutil.constants.values import ERR_MARKER
from kubeutil.controllers import ClusterController
from kubeutil.errors import KubeUtilError
from kubeutil.models.core.utilization_table import UtilizationTable
from kubeutil.models.state.fetch_options import FetchOptions

app = typer.Typer(
    help="kubeutil - Kubernetes cluster resource utilization summaries",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()
err_console = Console(stderr=True)

ContextOption = Annotated[
    Optional[str], typer.Option("--context", help="kubeconfig context to use")
]
SelectorOption = Annotated[
    Optional[str],
    typer.Option(
        "-l",
        "--selector",
        help="Node label selector (e.g. role=worker); totals cover only matching nodes",
    ),
]
TimeoutOption = Annotated[
    Optional[str],
    typer.Option("--request-timeout", help="kubectl request timeout (e.g. 30s)"),
]
LogLevelOption = Annotated[
    str, typer.Option("--log-level", help="Logging level", case_sensitive=False)
]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_options(
    context: str | None, selector: str | None, request_timeout: str | None
) -> FetchOptions:
    try:
        return FetchOptions.from_env(
            context=context, selector=selector, request_timeout=request_timeout
        )
    except ValidationError as exc:
        message = "; ".join(error["msg"] for error in exc.errors())
        raise typer.BadParameter(message) from exc


def to_rich_table(table: UtilizationTable) -> Table:
    """Convert a UtilizationTable into a rich Table."""
    rich_table = Table(title=table.title, header_style="bold")
    rich_table.add_column(table.header.name, no_wrap=True)
    for label in table.header.attributes:
        rich_table.add_column(label, justify="right")
    for row in table.body:
        rich_table.add_row(
            row.name,
            *(
                Text(value, style="bold red") if value == ERR_MARKER else value
                for value in row.attributes
            ),
        )
    return rich_table


def _print_table(
    options: FetchOptions,
    build: Callable[[ClusterController], Awaitable[UtilizationTable]],
) -> None:
    controller = ClusterController(options)
    try:
        table = asyncio.run(build(controller))
    except KubeUtilError as exc:
        err_console.print(Text.assemble(("Error: ", "red"), str(exc)))
        raise typer.Exit(code=1) from exc
    console.print(to_rich_table(table))


@app.command()
def cluster(
    context: ContextOption = None,
    selector: SelectorOption = None,
    request_timeout: TimeoutOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Show cluster-wide CPU and memory utilization."""
    _configure_logging(log_level)
    options = _build_options(context, selector, request_timeout)
    _print_table(options, lambda controller: controller.cluster_utilization())


@app.command()
def nodes(
    context: ContextOption = None,
    selector: SelectorOption = None,
    request_timeout: TimeoutOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Show CPU and memory utilization per node."""
    _configure_logging(log_level)
    options = _build_options(context, selector, request_timeout)
    _print_table(options, lambda controller: controller.node_utilization())


@app.command("node-list")
def node_list(
    context: ContextOption = None,
    selector: SelectorOption = None,
    request_timeout: TimeoutOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """List schedulable nodes with their allocatable capacity."""
    _configure_logging(log_level)
    options = _build_options(context, selector, request_timeout)
    _print_table(options, lambda controller: controller.node_list())


@app.command()
def shell(
    context: ContextOption = None,
    selector: SelectorOption = None,
    request_timeout: TimeoutOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Launch the interactive utilization shell."""
    from kubeutil.app import KubeUtilApp

    _configure_logging(log_level)
    options = _build_options(context, selector, request_timeout)
    KubeUtilApp(options).run()


@app.command()
def version() -> None:
    """Show current kubeutil version."""
    typer.echo(f"kubeutil {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
