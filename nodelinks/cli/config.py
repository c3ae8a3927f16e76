"""Config Typer app factory."""

import typer

from ..api.config.cmd_reinit import cmd_reinit
from ..api.config.cmd_remove import cmd_remove
from ..api.config.cmd_show import cmd_show
from ..api.config.cmd_version import cmd_version
from ._context import get_catalog, get_prompt
from ._handle_stage_result import _handle_stage_result


def show_cmd(ctx: typer.Context) -> None:
    """Show the current settings (initializes them if missing)."""
    _handle_stage_result(cmd_show, ctx)(get_catalog(ctx), get_prompt(ctx))


def remove_cmd(ctx: typer.Context) -> None:
    """Delete the settings file."""
    _handle_stage_result(cmd_remove, ctx)()


def reinit_cmd(ctx: typer.Context) -> None:
    """Run the interactive initialization again."""
    _handle_stage_result(cmd_reinit, ctx)(get_catalog(ctx), get_prompt(ctx))


def version_cmd(ctx: typer.Context) -> None:
    """Show nodelinks version information."""
    _handle_stage_result(cmd_version, ctx)()


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Settings operations",
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

    app.command(name="show")(show_cmd)
    app.command(name="remove")(remove_cmd)
    app.command(name="reinit")(reinit_cmd)
    app.command(name="version")(version_cmd)

    return app
