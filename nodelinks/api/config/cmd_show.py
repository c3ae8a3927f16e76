"""Show current settings command."""

from collections.abc import Iterator

from ..guard.UnsafePathError import UnsafePathError
from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from ..StageResult import StageResult
from . import ConfigShowOutput
from .InitializationCancelled import InitializationCancelled
from .load_config import load_config
from .NodelinksConfig import NodelinksConfig


def cmd_show(catalog: RegistryCatalog, prompt: Prompt) -> StageResult:
    """Show the settings, initializing them first if there are none."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = NodelinksConfig.get_config_path()
        yield (0.3, "Loading settings...")
        try:
            config = load_config(catalog, prompt)
        except (InitializationCancelled, UnsafePathError, RuntimeError, EOFError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Cannot load settings: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                content={},
                config_path=str(config_path),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Settings from {config_path}"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=[],
            content=config.to_dict(),
            config_path=str(config_path),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Showing current settings...", progress_callback=do_work)
