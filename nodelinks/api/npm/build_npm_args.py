"""Build the npm argument list for a run."""

from collections.abc import Sequence

from .REGISTRY_COMMANDS import REGISTRY_COMMANDS


def build_npm_args(args: Sequence[str], registry_url: str) -> list[str]:
    """Append ``--registry`` for commands that download or remove packages."""
    npm_args = list(args)
    if npm_args and npm_args[0] in REGISTRY_COMMANDS:
        npm_args += ["--registry", registry_url]
    return npm_args
