"""Mirror Typer app factory."""

import typer

from ..api.mirror.cmd_select import cmd_select
from ..api.mirror.cmd_set import cmd_set
from ..api.mirror.cmd_test import cmd_test
from ..api.registry.cmd_list import cmd_list
from ._context import get_catalog, get_prompt
from ._handle_stage_result import _handle_stage_result


def list_cmd(ctx: typer.Context) -> None:
    """List known mirrors with the indices accepted by the other commands."""
    _handle_stage_result(cmd_list, ctx)(get_catalog(ctx))


def set_cmd(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Catalog index, alias, address or URL"),
) -> None:
    """Set the registry mirror without probing it."""
    _handle_stage_result(cmd_set, ctx)(get_catalog(ctx), get_prompt(ctx), source)


def test_cmd(
    ctx: typer.Context,
    target: str = typer.Argument("all", help="Catalog index, alias, address, URL or 'all'"),
    timeout: int | None = typer.Option(None, "--timeout", "-t", min=1, help="Probe timeout in ms"),
) -> None:
    """Measure mirror latency."""
    _handle_stage_result(cmd_test, ctx)(get_catalog(ctx), target, timeout)


def select_cmd(
    ctx: typer.Context,
    target: str = typer.Argument("all", help="Probe just this mirror and offer to switch to it"),
) -> None:
    """Rank mirrors by latency and pick one interactively."""
    _handle_stage_result(cmd_select, ctx)(get_catalog(ctx), get_prompt(ctx), target)


def mirror() -> typer.Typer:
    """Create and configure the mirror Typer app."""
    app = typer.Typer(
        name="mirror",
        help="Registry mirror operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    app.command(name="list")(list_cmd)
    app.command(name="set")(set_cmd)
    app.command(name="test")(test_cmd)
    app.command(name="select")(select_cmd)

    return app
