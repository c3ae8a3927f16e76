"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from ..utils.configure_logging import configure_logging
    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if argv[:1] in (["--version"], ["-v"]):
        from ..api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"nodelinks {result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    configure_logging()
    app = _create_app()
    try:
        app(argv, prog_name="nodelinks")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0
