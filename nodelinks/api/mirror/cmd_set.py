"""Set the registry mirror by index, alias or address."""

from collections.abc import Iterator

from ..config.InitializationCancelled import InitializationCancelled
from ..config.NodelinksConfig import NodelinksConfig
from ..guard.UnsafePathError import UnsafePathError
from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from ..registry.TargetKind import TargetKind
from ..StageResult import StageResult
from . import MirrorSetOutput
from .set_repo import set_repo


def _fail(result_obj: StageResult, message: str, error: str) -> None:
    result_obj.result = message
    result_obj.output = MirrorSetOutput(
        errors=[error],
        warnings=[],
        repo="",
        previous="",
        config_path=str(NodelinksConfig.get_config_path()),
    ).model_dump(mode="python")
    result_obj.success = False


def cmd_set(catalog: RegistryCatalog, prompt: Prompt, source: str) -> StageResult:
    """Switch the configured mirror without probing it."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Resolving mirror...")
        if not source or not source.strip():
            yield (1.0, "Complete")
            _fail(result_obj, "Missing mirror source", "Pass an index, alias, address or URL")
            return

        resolved = catalog.resolve_input(source)
        if resolved.kind is TargetKind.ALL:
            yield (1.0, "Complete")
            _fail(result_obj, f"'{source}' does not name a single mirror", f"Cannot set mirror to '{source}'")
            return
        if resolved.kind is TargetKind.CUSTOM:
            yield (1.0, "Complete")
            _fail(result_obj, "The custom slot has no address", "Pass the custom registry address or URL directly")
            return

        address = resolved.address
        warnings: list[str] = []
        known = catalog.index_of(address) is not None
        if not known and not any(ch in address for ch in ".:"):
            warnings.append(f"'{address}' is neither a catalog alias nor an address; saved as given")

        yield (0.5, "Saving settings...")
        try:
            config, previous = set_repo(catalog, prompt, address)
        except (InitializationCancelled, UnsafePathError, RuntimeError, EOFError) as e:
            yield (1.0, "Complete")
            _fail(result_obj, f"Mirror not changed: {e}", str(e))
            return

        yield (1.0, "Complete")
        result_obj.result = f"Registry mirror set to {config.repo}"
        result_obj.output = MirrorSetOutput(
            errors=[],
            warnings=warnings,
            repo=config.repo,
            previous=previous,
            config_path=str(NodelinksConfig.get_config_path()),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Setting registry mirror to '{source}'...", progress_callback=do_work)
