"""Uninstall then install packages in the shared store."""

from collections.abc import Iterator, Sequence

from ..config.InitializationCancelled import InitializationCancelled
from ..config.load_config import load_config
from ..guard.UnsafePathError import UnsafePathError
from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from ..StageResult import StageResult
from . import NpmReinstallOutput
from .run_npm import run_npm


def cmd_reinstall(catalog: RegistryCatalog, prompt: Prompt, packages: Sequence[str]) -> StageResult:
    """Run ``npm uninstall`` to completion, then ``npm install`` if it succeeded."""
    packages = list(packages)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        uninstall_code = -1
        install_code = -1
        folder_path = ""
        registry = ""
        errors: list[str] = []

        if not packages:
            errors.append("Pass at least one package to reinstall")
        else:
            yield (0.1, "Loading settings...")
            try:
                config = load_config(catalog, prompt)
                folder_path = str(config.folder_path)
                registry = config.registry_url

                yield (0.2, "Uninstalling...")
                uninstall_code = run_npm(["uninstall", *packages], config)
                if uninstall_code != 0:
                    errors.append(f"npm uninstall exited with code {uninstall_code}; install skipped")
                else:
                    yield (0.6, "Installing...")
                    install_code = run_npm(["install", *packages], config)
                    if install_code != 0:
                        errors.append(f"npm install exited with code {install_code}")
            except (InitializationCancelled, UnsafePathError, RuntimeError, EOFError) as e:
                errors.append(str(e))

        yield (1.0, "Complete")
        result_obj.output = NpmReinstallOutput(
            errors=errors,
            warnings=[],
            packages=packages,
            uninstall_exit_code=uninstall_code,
            install_exit_code=install_code,
            folder_path=folder_path,
            registry=registry,
        ).model_dump(mode="python")
        result_obj.success = not errors
        if errors:
            result_obj.result = f"Reinstall failed: {errors[0]}"
            failed_code = uninstall_code if uninstall_code > 0 else install_code
            result_obj.exit_code = failed_code if failed_code > 0 else 1
        else:
            result_obj.result = f"Reinstalled {' '.join(packages)}"

    return StageResult(announce=f"Reinstalling {' '.join(packages)}...", progress_callback=do_work)
