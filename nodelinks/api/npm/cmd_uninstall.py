"""Remove packages from the shared store."""

from collections.abc import Sequence

from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from ..StageResult import StageResult
from . import NpmUninstallOutput
from .run_package_command import run_package_command


def cmd_uninstall(catalog: RegistryCatalog, prompt: Prompt, packages: Sequence[str]) -> StageResult:
    return run_package_command("uninstall", catalog, prompt, packages, NpmUninstallOutput, require_packages=True)
