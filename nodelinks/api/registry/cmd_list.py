"""List the mirror catalog."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import RegistryListOutput
from .RegistryCatalog import RegistryCatalog


def cmd_list(catalog: RegistryCatalog) -> StageResult:
    """Show catalog entries with the 1-based indices accepted as input."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Reading catalog...")
        mirrors = [
            {"index": i, "name": m.name, "value": m.value, "alias": list(m.alias)}
            for i, m in enumerate(catalog.mirrors, start=1)
        ]

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(mirrors)} mirror(s)"
        result_obj.output = RegistryListOutput(
            errors=[],
            warnings=[],
            mirrors=mirrors,
            catalog_path=str(RegistryCatalog.get_catalog_path()),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Listing registry mirrors...", progress_callback=do_work)
