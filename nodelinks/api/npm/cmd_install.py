"""Install packages into the shared store."""

from collections.abc import Sequence

from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from ..StageResult import StageResult
from . import NpmInstallOutput
from .run_package_command import run_package_command


def cmd_install(catalog: RegistryCatalog, prompt: Prompt, packages: Sequence[str] = ()) -> StageResult:
    """Run ``npm install`` in the shared store using the configured mirror.

    With no packages, installs whatever the store's package.json lists.
    """
    return run_package_command("install", catalog, prompt, packages, NpmInstallOutput, require_packages=False)
