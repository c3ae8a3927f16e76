"""Remove settings command - forces initialization on next use."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ConfigRemoveOutput
from .NodelinksConfig import NodelinksConfig


def cmd_remove() -> StageResult:
    """Delete the settings file. A missing file is not an error."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = NodelinksConfig.get_config_path()
        yield (0.5, f"Removing {config_path}...")
        try:
            removed = NodelinksConfig.delete(config_path)
        except OSError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to remove {config_path}: {e}"
            result_obj.output = ConfigRemoveOutput(
                errors=[str(e)],
                warnings=[],
                removed=False,
                config_path=str(config_path),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = "Settings removed" if removed else "No settings file to remove"
        result_obj.output = ConfigRemoveOutput(
            errors=[],
            warnings=[] if removed else [f"{config_path} does not exist"],
            removed=removed,
            config_path=str(config_path),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Removing settings...", progress_callback=do_work)
