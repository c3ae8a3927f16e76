"""Package-manager runner domain."""

from .._output_schemas.npm import NpmInstallOutput, NpmListOutput, NpmReinstallOutput, NpmUninstallOutput

__all__ = [
    "NpmInstallOutput",
    "NpmListOutput",
    "NpmReinstallOutput",
    "NpmUninstallOutput",
]
