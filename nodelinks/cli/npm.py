"""Package commands registered at the top level."""

import typer

from ..api.npm.cmd_install import cmd_install
from ..api.npm.cmd_list import cmd_list
from ..api.npm.cmd_reinstall import cmd_reinstall
from ..api.npm.cmd_uninstall import cmd_uninstall
from ._context import get_catalog, get_prompt
from ._handle_stage_result import _handle_stage_result


def install_cmd(
    ctx: typer.Context,
    packages: list[str] | None = typer.Argument(None, help="Package specs passed to npm install"),
) -> None:
    """Install packages into the shared store."""
    _handle_stage_result(cmd_install, ctx)(get_catalog(ctx), get_prompt(ctx), packages or [])


def uninstall_cmd(
    ctx: typer.Context,
    packages: list[str] = typer.Argument(..., help="Package names passed to npm uninstall"),
) -> None:
    """Remove packages from the shared store."""
    _handle_stage_result(cmd_uninstall, ctx)(get_catalog(ctx), get_prompt(ctx), packages)


def reinstall_cmd(
    ctx: typer.Context,
    packages: list[str] = typer.Argument(..., help="Packages to uninstall, then install again"),
) -> None:
    """Uninstall, then install packages."""
    _handle_stage_result(cmd_reinstall, ctx)(get_catalog(ctx), get_prompt(ctx), packages)


def list_cmd(ctx: typer.Context) -> None:
    """List top-level packages in the shared store."""
    _handle_stage_result(cmd_list, ctx)(get_catalog(ctx), get_prompt(ctx))


def register_npm_commands(app: typer.Typer) -> None:
    """Add the package commands and their short aliases to ``app``."""
    for name, alias, func in (
        ("install", "i", install_cmd),
        ("uninstall", "ui", uninstall_cmd),
        ("reinstall", "ri", reinstall_cmd),
        ("list", "l", list_cmd),
    ):
        app.command(name=name)(func)
        app.command(name=alias, hidden=True)(func)
