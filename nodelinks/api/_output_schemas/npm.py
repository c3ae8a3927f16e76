"""Output schemas for package-manager commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class NpmRunOutput(BaseOutputSchema):
    """Output schema shared by install and uninstall."""

    packages: list[str] = Field(..., description="Package specs passed to npm")
    exit_code: int = Field(..., description="npm exit code, -1 if npm never ran")
    folder_path: str = Field(..., description="Shared store directory npm ran in")
    registry: str = Field(..., description="Registry URL passed to npm")


class NpmReinstallOutput(BaseOutputSchema):
    """Output schema for reinstall (uninstall to completion, then install)."""

    packages: list[str] = Field(..., description="Package specs passed to npm")
    uninstall_exit_code: int = Field(..., description="Exit code of the uninstall step, -1 if it never ran")
    install_exit_code: int = Field(..., description="Exit code of the install step, -1 if it never ran")
    folder_path: str = Field(..., description="Shared store directory npm ran in")
    registry: str = Field(..., description="Registry URL passed to npm")


class NpmListOutput(BaseOutputSchema):
    """Output schema for the top-level package listing."""

    packages: list[str] = Field(..., description="Top-level packages, sorted")
    folder_path: str = Field(..., description="Shared store directory")


class NpmInstallOutput(NpmRunOutput):
    """Output schema for install."""


class NpmUninstallOutput(NpmRunOutput):
    """Output schema for uninstall."""


register_output_schema("npm", "install", NpmInstallOutput)
register_output_schema("npm", "uninstall", NpmUninstallOutput)
register_output_schema("npm", "reinstall", NpmReinstallOutput)
register_output_schema("npm", "list", NpmListOutput)
