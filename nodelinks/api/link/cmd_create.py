"""Create the project link command."""

import os
from collections.abc import Iterator
from pathlib import Path

from ...constants import DEPS_DIRNAME
from ..config.InitializationCancelled import InitializationCancelled
from ..config.load_config import load_config
from ..guard.UnsafePathError import UnsafePathError
from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from ..StageResult import StageResult
from . import LinkCreateOutput
from .create_link import create_link
from .is_link import is_link
from .LinkError import LinkError
from .resolve_store_path import resolve_store_path


def cmd_create(catalog: RegistryCatalog, prompt: Prompt, project_dir: Path | None = None) -> StageResult:
    """Link ``node_modules`` in the project directory (default: cwd) to the shared store."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        project = Path(project_dir or Path.cwd()).absolute()
        link_path = project / DEPS_DIRNAME
        target_path = ""

        yield (0.2, "Loading settings...")
        try:
            config = load_config(catalog, prompt)
            target_path = str(resolve_store_path(config.folder_path))
            existed = os.path.lexists(link_path) and is_link(link_path)

            yield (0.6, f"Linking {link_path}...")
            create_link(config.folder_path, project)
        except (LinkError, InitializationCancelled, UnsafePathError, RuntimeError, EOFError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to create link: {e}"
            result_obj.output = LinkCreateOutput(
                errors=[str(e)],
                warnings=[],
                link_path=str(link_path),
                target_path=target_path,
                created=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Link already exists: {link_path}" if existed else f"Linked {link_path} -> {target_path}"
        result_obj.output = LinkCreateOutput(
            errors=[],
            warnings=[],
            link_path=str(link_path),
            target_path=target_path,
            created=not existed,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Creating node_modules link...", progress_callback=do_work)
