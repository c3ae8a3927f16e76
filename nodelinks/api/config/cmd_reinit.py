"""Re-run interactive initialization."""

from collections.abc import Iterator

from ..guard.UnsafePathError import UnsafePathError
from ..mirror.Prober import Prober
from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from ..StageResult import StageResult
from . import ConfigReinitOutput
from .initialize import initialize
from .InitializationCancelled import InitializationCancelled
from .NodelinksConfig import NodelinksConfig


def cmd_reinit(catalog: RegistryCatalog, prompt: Prompt, prober: Prober | None = None) -> StageResult:
    """Ask for the shared directory and mirror again, replacing the settings."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = NodelinksConfig.get_config_path()
        yield (0.2, "Starting initialization...")
        try:
            config = initialize(catalog, prompt, path=config_path, prober=prober)
        except InitializationCancelled as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ConfigReinitOutput(
                errors=[],
                warnings=["Initialization cancelled; settings unchanged"],
                content={},
                config_path=str(config_path),
            ).model_dump(mode="python")
            result_obj.success = True
            return
        except (UnsafePathError, RuntimeError, EOFError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Initialization failed: {e}"
            result_obj.output = ConfigReinitOutput(
                errors=[str(e)],
                warnings=[],
                content={},
                config_path=str(config_path),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Settings written to {config_path}"
        result_obj.output = ConfigReinitOutput(
            errors=[],
            warnings=[],
            content=config.to_dict(),
            config_path=str(config_path),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Re-initializing settings...", progress_callback=do_work)
