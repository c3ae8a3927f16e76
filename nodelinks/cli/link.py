"""Link Typer app factory."""

from pathlib import Path

import typer

from ..api.link.cmd_create import cmd_create
from ..api.link.cmd_delete import cmd_delete
from ._context import get_catalog, get_prompt
from ._handle_stage_result import _handle_stage_result


def create_cmd(
    ctx: typer.Context,
    project: Path | None = typer.Argument(None, help="Project directory (default: current directory)"),
) -> None:
    """Point the project's node_modules at the shared store."""
    _handle_stage_result(cmd_create, ctx)(get_catalog(ctx), get_prompt(ctx), project)


def delete_cmd(
    ctx: typer.Context,
    project: Path | None = typer.Argument(None, help="Project directory (default: current directory)"),
) -> None:
    """Remove the project's node_modules link, never a real directory."""
    _handle_stage_result(cmd_delete, ctx)(project)


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Project node_modules link operations",
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

    app.command(name="create")(create_cmd)
    app.command(name="delete")(delete_cmd)

    return app
