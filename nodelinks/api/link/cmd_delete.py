"""Delete the project link command."""

from collections.abc import Iterator
from pathlib import Path

from ...constants import DEPS_DIRNAME
from ..StageResult import StageResult
from . import LinkDeleteOutput
from .LinkError import LinkError
from .remove_link import remove_link


def cmd_delete(project_dir: Path | None = None) -> StageResult:
    """Remove the ``node_modules`` link in the project directory (default: cwd)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        link_path = Path(project_dir or Path.cwd()).absolute() / DEPS_DIRNAME
        yield (0.5, f"Removing {link_path}...")
        try:
            removed = remove_link(link_path.parent)
        except LinkError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to delete link: {e}"
            result_obj.output = LinkDeleteOutput(
                errors=[str(e)],
                warnings=[],
                link_path=str(link_path),
                removed=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Removed link {link_path}" if removed else "No link to remove"
        result_obj.output = LinkDeleteOutput(
            errors=[],
            warnings=[],
            link_path=str(link_path),
            removed=removed is not None,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Deleting node_modules link...", progress_callback=do_work)
