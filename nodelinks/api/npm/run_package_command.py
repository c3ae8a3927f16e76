"""Shared body of the install and uninstall commands."""

from collections.abc import Iterator, Sequence

from .._output_schemas.npm import NpmRunOutput
from ..config.InitializationCancelled import InitializationCancelled
from ..config.load_config import load_config
from ..guard.UnsafePathError import UnsafePathError
from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from ..StageResult import StageResult
from .run_npm import run_npm


def run_package_command(
    verb: str,
    catalog: RegistryCatalog,
    prompt: Prompt,
    packages: Sequence[str],
    schema: type[NpmRunOutput],
    require_packages: bool,
) -> StageResult:
    packages = list(packages)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        if require_packages and not packages:
            yield (1.0, "Complete")
            result_obj.result = f"Nothing to {verb}"
            result_obj.output = schema(
                errors=[f"Pass at least one package to {verb}"],
                warnings=[],
                packages=[],
                exit_code=-1,
                folder_path="",
                registry="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.1, "Loading settings...")
        folder_path = ""
        registry = ""
        try:
            config = load_config(catalog, prompt)
            folder_path = str(config.folder_path)
            registry = config.registry_url
            yield (0.3, f"Running npm {verb} in {folder_path}...")
            exit_code = run_npm([verb, *packages], config)
        except (InitializationCancelled, UnsafePathError, RuntimeError, EOFError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"npm {verb} not run: {e}"
            result_obj.output = schema(
                errors=[str(e)],
                warnings=[],
                packages=packages,
                exit_code=-1,
                folder_path=folder_path,
                registry=registry,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        errors = [] if exit_code == 0 else [f"npm {verb} exited with code {exit_code}"]
        result_obj.result = f"npm {verb} completed" if exit_code == 0 else f"npm {verb} failed (exit code {exit_code})"
        result_obj.output = schema(
            errors=errors,
            warnings=[],
            packages=packages,
            exit_code=exit_code,
            folder_path=folder_path,
            registry=registry,
        ).model_dump(mode="python")
        result_obj.success = exit_code == 0
        result_obj.exit_code = exit_code

    target = " ".join(packages) if packages else "store dependencies"
    return StageResult(announce=f"Running npm {verb} for {target}...", progress_callback=do_work)
