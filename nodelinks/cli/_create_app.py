"""Create the main Typer CLI app."""

import typer

from ..api.prompt.ConsolePrompt import ConsolePrompt
from ..api.registry.RegistryCatalog import RegistryCatalog
from . import config as config_cli
from . import link as link_cli
from . import mirror as mirror_cli
from .npm import register_npm_commands

# Short names kept from the historical command set
HIDDEN_ALIASES = (
    ("version", config_cli.version_cmd),
    ("show", config_cli.show_cmd),
    ("rs", config_cli.remove_cmd),
    ("remove-settings", config_cli.remove_cmd),
    ("reinit", config_cli.reinit_cmd),
    ("set-repo", mirror_cli.set_cmd),
    ("trp", mirror_cli.test_cmd),
    ("test-repo", mirror_cli.test_cmd),
    ("crp", mirror_cli.select_cmd),
    ("change-repo", mirror_cli.select_cmd),
    ("create", link_cli.create_cmd),
    ("del", link_cli.delete_cmd),
)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="nodelinks: one shared node_modules for many projects",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(config_cli.config(), name="config")
    app.add_typer(mirror_cli.mirror(), name="mirror")
    app.add_typer(link_cli.link(), name="link")
    register_npm_commands(app)
    for name, func in HIDDEN_ALIASES:
        app.command(name=name, hidden=True)(func)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(2)

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        try:
            catalog = RegistryCatalog.load()
        except (ValueError, OSError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["catalog"] = catalog
        ctx.obj["prompt"] = ConsolePrompt()

    return app
