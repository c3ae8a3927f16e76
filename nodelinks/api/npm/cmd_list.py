"""List top-level packages in the shared store."""

from collections.abc import Iterator

from ..config.InitializationCancelled import InitializationCancelled
from ..config.load_config import load_config
from ..guard.UnsafePathError import UnsafePathError
from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from ..StageResult import StageResult
from . import NpmListOutput
from .list_installed import list_installed


def cmd_list(catalog: RegistryCatalog, prompt: Prompt) -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        folder_path = ""
        yield (0.2, "Loading settings...")
        try:
            config = load_config(catalog, prompt)
            folder_path = str(config.folder_path)
            yield (0.5, "Running npm list...")
            packages = list_installed(config)
        except (InitializationCancelled, UnsafePathError, RuntimeError, ValueError, OSError, EOFError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to list packages: {e}"
            result_obj.output = NpmListOutput(
                errors=[str(e)],
                warnings=[],
                packages=[],
                folder_path=folder_path,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"{len(packages)} top-level package(s)" if packages else "No top-level packages"
        result_obj.output = NpmListOutput(
            errors=[],
            warnings=[],
            packages=packages,
            folder_path=folder_path,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Listing installed packages...", progress_callback=do_work)
